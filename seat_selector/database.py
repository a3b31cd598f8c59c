import json
import os
from typing import Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from seat_selector import config
from seat_selector.logger_config import logger
from seat_selector.models.booking import BookingRecord


class BookingStore:
    """Single-slot key-value persistence for the most recent booking.

    Subclasses provide raw string reads and writes for one key; this class
    owns serialization and the best-effort error policy: failed writes are
    logged and reported as False, unreadable or malformed data reads as no
    record.
    """

    def __init__(self, key: str = config.BOOKING_STORAGE_KEY):
        self.key = key

    def _write(self, raw: str) -> None:
        raise NotImplementedError

    def _read(self) -> Optional[str]:
        raise NotImplementedError

    def save(self, record: BookingRecord) -> bool:
        """Overwrite the slot with a booking record"""
        try:
            self._write(record.model_dump_json())
        except Exception as e:
            logger.error(f"Error saving booking to {self.__class__.__name__}: {e}")
            return False
        return True

    def load_last(self) -> Optional[BookingRecord]:
        """Most recent booking record, None when missing or unreadable"""
        try:
            raw = self._read()
        except Exception as e:
            logger.error(f"Error reading booking from {self.__class__.__name__}: {e}")
            return None

        if not raw:
            return None

        try:
            return BookingRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Error parsing booking JSON: {e}")
            return None


class InMemoryBookingStore(BookingStore):
    def __init__(self, key: str = config.BOOKING_STORAGE_KEY):
        super().__init__(key)
        self.items: Dict[str, str] = {}

    def _write(self, raw: str) -> None:
        self.items[self.key] = raw

    def _read(self) -> Optional[str]:
        return self.items.get(self.key)


class FileBookingStore(BookingStore):
    """Key-value slots kept in one JSON object on local disk"""

    def __init__(self, path: str = config.BOOKING_STORE_PATH, key: str = config.BOOKING_STORAGE_KEY):
        super().__init__(key)
        self.path = path

    def _load_items(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read().strip()
            items = json.loads(content) if content else {}
        except ValueError:
            # covers both UnicodeDecodeError and JSONDecodeError
            logger.warning(f"Booking store file {self.path} is not valid JSON, starting fresh")
            return {}
        return items if isinstance(items, dict) else {}

    def _write(self, raw: str) -> None:
        items = self._load_items()
        items[self.key] = raw
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f, indent=4)

    def _read(self) -> Optional[str]:
        value = self._load_items().get(self.key)
        return value if isinstance(value, str) else None


class DynamoDBBookingStore(BookingStore):
    """Slot stored as a single DynamoDB item (pk=key, sk="LAST")"""

    SORT_KEY = "LAST"

    def __init__(self, table_name: str = None, key: str = config.BOOKING_STORAGE_KEY):
        super().__init__(key)
        self.table_name = table_name or config.BOOKINGS_TABLE_NAME

        # Initialize DynamoDB resource for easier operations
        self.dynamodb_resource = boto3.resource(
            "dynamodb",
            aws_access_key_id=config.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=config.AWS_SECRET_ACCESS_KEY,
            region_name=config.AWS_REGION,
        )

        if self.table_name:
            self.table = self.dynamodb_resource.Table(self.table_name)
        else:
            self.table = None

    def _require_table(self):
        if self.table is None:
            raise RuntimeError("Table name not configured in environment variables")
        return self.table

    def _write(self, raw: str) -> None:
        try:
            self._require_table().put_item(
                Item={"pk": self.key, "sk": self.SORT_KEY, "payload": raw}
            )
        except (BotoCoreError, ClientError) as e:
            raise RuntimeError(f"DynamoDB put_item failed: {e}") from e

    def _read(self) -> Optional[str]:
        try:
            response = self._require_table().get_item(
                Key={"pk": self.key, "sk": self.SORT_KEY}
            )
        except (BotoCoreError, ClientError) as e:
            raise RuntimeError(f"DynamoDB get_item failed: {e}") from e

        item = response.get("Item")
        if not item:
            return None
        return item.get("payload")


def create_booking_store(backend: str = None) -> BookingStore:
    """Build the configured booking store backend"""
    backend = (backend or config.BOOKING_STORE_BACKEND).lower()
    if backend == "memory":
        return InMemoryBookingStore()
    if backend == "dynamodb":
        return DynamoDBBookingStore()
    if backend == "file":
        return FileBookingStore()
    raise ValueError(f"Unknown booking store backend '{backend}'")
