"""Seed data generation."""

import logging
from typing import Any

from faker import Faker

from shop_common.infra import Database
from shop_common.models import ProductIn, UserCreate

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 10


def generate_user_data(faker: Faker) -> dict[str, Any]:
    return {
        "firstName": faker.first_name(),
        "lastName": faker.last_name(),
        "email": faker.email(),
    }


def generate_product_data(faker: Faker) -> dict[str, Any]:
    return {
        "name": faker.word(),
        "quantity": faker.random_int(min=1, max=100),
        "price": round(faker.pyfloat(min_value=1, max_value=1000, right_digits=2), 2),
        "image": faker.url(),
    }


class SeedService:
    """Bulk-inserts randomly generated users and products.

    Seeding is not idempotent; every call adds a fresh batch.
    """

    def __init__(self, database: Database, faker: Faker | None = None, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        self.database = database
        self.faker = faker or Faker()
        self.batch_size = batch_size

    async def seed(self) -> None:
        """Insert one batch of users and one batch of products."""
        users = [
            UserCreate.model_validate(generate_user_data(self.faker)).model_dump(by_alias=True)
            for _ in range(self.batch_size)
        ]
        await self.database.users.insert_many(users)

        products = [
            ProductIn.model_validate(generate_product_data(self.faker)).model_dump() for _ in range(self.batch_size)
        ]
        await self.database.products.insert_many(products)

        logger.info("Seeded %d users and %d products", len(users), len(products))
