"""
Ranking — Ранжирование набора ставок

Компаратор поверх предикатов Bid. Аукцион должен ранжировать ставки только
через эти функции (а не сравнивая amount / made_at напрямую), чтобы правило
"активная ставка всегда выше снятой" соблюдалось везде одинаково.
"""

from functools import cmp_to_key
from typing import Iterable, List, Optional

from .bid import Bid


def compare_bids(a: Bid, b: Bid) -> int:
    """
    Трёхзначное сравнение ставок.

    Returns:
        -1 если a ниже b, 0 если ставки эквивалентны, 1 если a выше b
    """
    if a.is_lower_bid_than(b):
        return -1
    if a.is_equivalent_bid_to(b):
        return 0
    return 1


bid_sort_key = cmp_to_key(compare_bids)


def rank_bids(bids: Iterable[Bid]) -> List[Bid]:
    """
    Сортировка ставок от высшей к низшей.

    Эквивалентные ставки сохраняют исходный порядок (сортировка стабильна).

    Args:
        bids: Ставки аукциона

    Returns:
        Новый список, первая ставка является текущим победителем
    """
    return sorted(bids, key=bid_sort_key, reverse=True)


def select_winning_bid(bids: Iterable[Bid]) -> Optional[Bid]:
    """
    Выбор высшей ставки.

    Если все ставки сняты, возвращается высшая из снятых; проверка
    is_active() остаётся за вызывающим.

    Returns:
        Высшая ставка или None для пустого набора
    """
    return max(bids, key=bid_sort_key, default=None)
