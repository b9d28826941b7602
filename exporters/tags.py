"""Exportador para la colección tags (nombre en el campo 'tagname')."""

from typing import NamedTuple

from .base import BaseExporter, quote_literal, require_field


class TagRecord(NamedTuple):
    ref_id: str
    name: str


class TagsExporter(BaseExporter):
    collection = "tags"
    columns = ["ref_id", "name", "created_at", "updated_at"]

    def __init__(self, table="tags", dialect="mysql"):
        super().__init__(table, dialect)

    def extract_record(self, snapshot):
        return TagRecord(
            ref_id=snapshot.id,
            name=require_field(snapshot, "tagname", collection=self.collection),
        )

    def row_values(self, record):
        return [
            quote_literal(record.ref_id),
            quote_literal(record.name),
            self.now,
            self.now,
        ]
