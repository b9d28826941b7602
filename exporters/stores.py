"""
Exportador para la colección shops.

La colección de Firestore se llama 'shops' pero la tabla destino es
'stores'. La plataforma se lee del campo 'flatform': así está escrito en
los documentos de origen. No corregir hasta confirmar que el schema de
Firestore cambió (ver PLATFORM_FIELD).

Uso (desde firesql.py):
    exporter = StoresExporter(table='stores')
    sql = exporter.generate_sql(snapshots)
"""

from typing import NamedTuple

from .base import BaseExporter, quote_literal, require_field


class StoreRecord(NamedTuple):
    ref_id: str
    url: str
    platform: str


class StoresExporter(BaseExporter):
    """Exporta shops → stores. Todas las tiendas se importan activas."""

    collection = "shops"
    columns = ["url", "ref_id", "platform", "is_active", "created_at", "updated_at"]

    # Typo conocido en origen: flatform vs platform
    PLATFORM_FIELD = "flatform"
    IS_ACTIVE = 1

    def __init__(self, table="stores", dialect="mysql"):
        super().__init__(table, dialect)

    def extract_record(self, snapshot):
        return StoreRecord(
            ref_id=snapshot.id,
            url=require_field(snapshot, "url", collection=self.collection),
            platform=require_field(
                snapshot, self.PLATFORM_FIELD, collection=self.collection
            ),
        )

    def row_values(self, record):
        return [
            quote_literal(record.url),
            quote_literal(record.ref_id),
            quote_literal(record.platform),
            str(self.IS_ACTIVE),
            self.now,
            self.now,
        ]
