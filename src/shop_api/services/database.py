"""Database initialization service."""

import logging

from azure.cosmos import PartitionKey
from azure.cosmos.aio import CosmosClient, DatabaseProxy
from azure.identity.aio import DefaultAzureCredential

from shop_api.config import Settings
from shop_common.infra import Database
from shop_common.infra.cosmos import CosmosCollection

logger = logging.getLogger(__name__)


class CosmosDbInitializer:
    """Connect to Cosmos DB and create the database and containers if they don't exist."""

    def __init__(self, settings: Settings):
        """Initialize the initializer.

        Args:
            settings: Application settings with Cosmos DB configuration
        """
        self.settings = settings
        self.client: CosmosClient | None = None
        self.credential: DefaultAzureCredential | None = None
        self.database: DatabaseProxy | None = None

    @property
    def is_emulator(self) -> bool:
        endpoint = self.settings.azure_cosmosdb_endpoint or ""
        return "localhost" in endpoint.lower() or "127.0.0.1" in endpoint

    def connect(self) -> None:
        """Create the Cosmos DB client, using managed identity when no key is configured."""
        if not self.settings.azure_cosmosdb_endpoint:
            raise ValueError("AZURE_COSMOSDB_ENDPOINT is required")

        if self.settings.azure_cosmosdb_key:
            self.client = CosmosClient(
                url=self.settings.azure_cosmosdb_endpoint,
                credential=self.settings.azure_cosmosdb_key,
            )
        else:
            self.credential = DefaultAzureCredential()
            self.client = CosmosClient(url=self.settings.azure_cosmosdb_endpoint, credential=self.credential)
        logger.info("Connecting to Cosmos DB at %s", self.settings.azure_cosmosdb_endpoint)

    async def initialize_database(self) -> None:
        """Create database if it doesn't exist."""
        self.database = await self.client.create_database_if_not_exists(id=self.settings.database_name)
        logger.info("Database '%s' initialized", self.settings.database_name)

    async def initialize_container(self, container_name: str) -> CosmosCollection:
        """Create a container partitioned on ``/id`` if it doesn't exist."""
        # Emulator requires provisioned throughput
        kwargs = {"offer_throughput": 400} if self.is_emulator else {}
        container = await self.database.create_container_if_not_exists(
            id=container_name,
            partition_key=PartitionKey(path="/id"),
            **kwargs,
        )
        logger.info("Container '%s' initialized with partition key '/id'", container_name)
        return CosmosCollection(container, name=container_name)

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
        if self.credential is not None:
            await self.credential.close()

    async def initialize(self) -> Database:
        """Run full initialization: connect, create database and containers."""
        self.connect()
        try:
            await self.initialize_database()
            users = await self.initialize_container(self.settings.users_container)
            products = await self.initialize_container(self.settings.products_container)
            orders = await self.initialize_container(self.settings.orders_container)
        except Exception:
            await self.close()
            raise

        logger.info("Cosmos DB initialization completed successfully")
        return Database(users=users, products=products, orders=orders, resources=[self])


async def open_database(settings: Settings) -> Database:
    """Open the database configured in ``settings``.

    Args:
        settings: Application settings

    Returns:
        Database handle owned by the caller, which must close it

    Raises:
        Exception: Any connection or provisioning failure; the application
            must not start serving without a database
    """
    if settings.database_backend == "memory":
        logger.warning("Using in-memory database; data is lost on restart")
        return Database.in_memory()

    initializer = CosmosDbInitializer(settings)
    try:
        return await initializer.initialize()
    except Exception as e:
        logger.error("Failed to initialize Cosmos DB: %s", e)
        raise
