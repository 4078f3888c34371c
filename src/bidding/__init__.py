"""
Bidding core: модель ставки аукциона и правила её ранжирования.

Независим от внешних систем (хранилище, транспорт, аукцион-агрегат).
"""
