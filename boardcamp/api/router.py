from fastapi import APIRouter

from boardcamp.api.routers import categories, games, customers, rentals

api_router = APIRouter()

api_router.include_router(categories.router)
api_router.include_router(games.router)
api_router.include_router(customers.router)
api_router.include_router(rentals.router)
