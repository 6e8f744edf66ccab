"""
Menu — the immutable pizza list seeded at startup.
"""

from pydantic import BaseModel, ConfigDict


class Pizza(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: float


DEFAULT_PIZZAS = (
    Pizza(id=1, name="Margherita", price=8),
    Pizza(id=2, name="Pepperoni", price=10),
    Pizza(id=3, name="Quatre Fromages", price=12),
    Pizza(id=4, name="Végétarienne", price=11),
)


class Menu:
    def __init__(self, pizzas: tuple[Pizza, ...] = DEFAULT_PIZZAS) -> None:
        self._pizzas = {p.id: p for p in pizzas}

    def all(self) -> list[Pizza]:
        return list(self._pizzas.values())

    def find(self, pizza_id: int) -> Pizza | None:
        return self._pizzas.get(pizza_id)
