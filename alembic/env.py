from logging.config import fileConfig

from alembic import context

from app.config import settings
from app.database import engine
from app.models.base import Base

# Import all model classes so they're registered on Base.metadata
from app.models.profile import Profile  # noqa: F401
from app.models.landlord import Landlord  # noqa: F401
from app.models.property import Property  # noqa: F401
from app.models.unit import Unit  # noqa: F401
from app.models.tenant import Tenant  # noqa: F401
from app.models.payment import Payment  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
