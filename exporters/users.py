"""
Exportador para la colección users.

Cada documento genera una fila en la tabla users. El uid es el id del
documento; el email es obligatorio. El resto de columnas son constantes:
- username, hashed_password: NULL (se completan al primer login)
- role: 'user'
- status: -10 (usuario importado, pendiente de activación)

Uso (desde firesql.py):
    exporter = UsersExporter(table='users')
    sql = exporter.generate_sql(snapshots)
"""

from typing import NamedTuple

from .base import BaseExporter, quote_literal, require_field


class UserRecord(NamedTuple):
    uid: str
    email: str


class UsersExporter(BaseExporter):
    """Exporta users → users."""

    collection = "users"
    columns = [
        "uid",
        "username",
        "email",
        "hashed_password",
        "role",
        "status",
        "created_at",
        "updated_at",
    ]

    ROLE = "user"
    STATUS = -10

    def __init__(self, table="users", dialect="mysql"):
        super().__init__(table, dialect)

    def extract_record(self, snapshot):
        return UserRecord(
            uid=snapshot.id,
            email=require_field(snapshot, "email", collection=self.collection),
        )

    def row_values(self, record):
        return [
            quote_literal(record.uid),
            "NULL",
            quote_literal(record.email),
            "NULL",
            quote_literal(self.ROLE),
            str(self.STATUS),
            self.now,
            self.now,
        ]
