from boardcamp.db.models.category import Category
from boardcamp.db.models.game import Game
from boardcamp.db.models.customer import Customer
from boardcamp.db.models.rental import Rental

__all__ = ["Category", "Game", "Customer", "Rental"]
