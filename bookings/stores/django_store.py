"""Django ORM implementation of the StoreFacade."""

import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any
from uuid import UUID

from django.conf import settings
from django.db import (
    DEFAULT_DB_ALIAS,
    DatabaseError,
    IntegrityError,
    InterfaceError,
    OperationalError,
    connections,
    models,
    transaction,
)

from bookings import models as orm
from bookings.domain.errors import StoreConnectionError
from bookings.stores.connection import ConnectionCache, get_connection_cache
from bookings.stores.interfaces import (
    BOOKINGS,
    EVENTS,
    ConstraintViolation,
    Document,
    StoreFacade,
)

logger = logging.getLogger(__name__)

_MODELS: dict[str, type[models.Model]] = {
    EVENTS: orm.Event,
    BOOKINGS: orm.Booking,
}


def open_database(alias: str = DEFAULT_DB_ALIAS):
    """Check the configured database is reachable and return the connection handler.

    The handler is process-wide. Each thread still gets its own connection
    from it on first use.

    Raises:
        StoreConnectionError: If the alias is not configured or unreachable.
    """
    configured = settings.DATABASES.get(alias) or {}
    if not configured.get("ENGINE") or not configured.get("NAME"):
        raise StoreConnectionError(
            "Please define the DATABASE_ENGINE and DATABASE_NAME environment variables"
        )
    connection = connections[alias]
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        raise StoreConnectionError(f"Could not connect to database '{alias}'") from exc
    logger.info("Connected to database '%s' (%s)", alias, connection.vendor)
    return connections


def _to_document(instance: models.Model) -> Document:
    return {
        field.attname: getattr(instance, field.attname)
        for field in instance._meta.concrete_fields
    }


def _violated_index(model: type[models.Model], exc: IntegrityError) -> str | None:
    """Name the unique constraint an IntegrityError came from.

    PostgreSQL reports the constraint name; SQLite lists the columns.
    """
    message = str(exc)
    table = model._meta.db_table
    for constraint in model._meta.constraints:
        if not isinstance(constraint, models.UniqueConstraint):
            continue
        if constraint.name in message:
            return constraint.name
        columns = [model._meta.get_field(name).column for name in constraint.fields]
        if all(f"{table}.{column}" in message for column in columns):
            return constraint.name
    return None


class DjangoStore(StoreFacade):
    """Database-backed document store using Django ORM."""

    def __init__(self, connection_cache: ConnectionCache) -> None:
        self._connections = connection_cache

    def get_connection(self) -> Any:
        return self._connections.get_connection()

    def _model(self, collection: str) -> type[models.Model]:
        self.get_connection()
        try:
            return _MODELS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection '{collection}'") from None

    @contextmanager
    def _errors(self, model: type[models.Model]) -> Iterator[None]:
        """Translate database failures raised inside the block.

        A lost connection drops the cached handle so the next call reconnects.
        """
        try:
            yield
        except IntegrityError as exc:
            index_name = _violated_index(model, exc)
            if index_name is None:
                raise
            raise ConstraintViolation(index_name) from exc
        except (OperationalError, InterfaceError) as exc:
            self._connections.reset()
            logger.error("Lost database connection: %s", exc)
            raise StoreConnectionError("Could not reach the database") from exc

    def insert(self, collection: str, record: Mapping[str, Any]) -> Document:
        model = self._model(collection)
        with self._errors(model), transaction.atomic():
            instance = model.objects.create(**record)
        return _to_document(instance)

    def update(
        self, collection: str, record_id: UUID, patch: Mapping[str, Any]
    ) -> Document | None:
        model = self._model(collection)
        with self._errors(model), transaction.atomic():
            instance = model.objects.filter(pk=record_id).first()
            if instance is None:
                return None
            for name, value in patch.items():
                setattr(instance, name, value)
            instance.save(update_fields=[*patch, "updated_at"])
        return _to_document(instance)

    def find_by_id(self, collection: str, record_id: UUID) -> Document | None:
        model = self._model(collection)
        with self._errors(model):
            instance = model.objects.filter(pk=record_id).first()
        return None if instance is None else _to_document(instance)

    def exists_by_id(self, collection: str, record_id: UUID) -> bool:
        model = self._model(collection)
        with self._errors(model):
            return model.objects.filter(pk=record_id).exists()

    def find_by_unique_key(
        self, collection: str, key: Mapping[str, Any]
    ) -> Document | None:
        model = self._model(collection)
        with self._errors(model):
            instance = model.objects.filter(**key).first()
        return None if instance is None else _to_document(instance)

    def find_many(
        self,
        collection: str,
        filters: Mapping[str, Any],
        order_by: Sequence[str] = ("-created_at",),
    ) -> list[Document]:
        model = self._model(collection)
        with self._errors(model):
            instances = list(model.objects.filter(**filters).order_by(*order_by))
        return [_to_document(instance) for instance in instances]

    def count(self, collection: str, filters: Mapping[str, Any]) -> int:
        model = self._model(collection)
        with self._errors(model):
            return model.objects.filter(**filters).count()


def get_store() -> DjangoStore:
    """Build a store bound to the process-wide connection cache."""
    return DjangoStore(get_connection_cache())
