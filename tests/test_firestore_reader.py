"""
Tests de lectura paginada de Firestore.

Usan FakeClient (tests/helpers.py): no hay conexión real.
"""

import sys
import os

# Agregar directorio raíz al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from google.api_core.exceptions import ServiceUnavailable
from google.cloud.firestore_v1.field_path import FieldPath

import firestore_reader
from errors import RetrievalError
from tests.helpers import FakeClient, FakeSnapshot


def _tags(count):
    return [FakeSnapshot(f"t{i:02d}", {"tagname": f"tag{i}"}) for i in range(count)]


def test_fetch_exhausts_all_pages():
    print("\n🔍 Test: paginación hasta agotar la colección")

    client = FakeClient({"tags": _tags(5)})
    snapshots = firestore_reader.fetch_collection(client, "tags", page_size=2)

    assert [s.id for s in snapshots] == ["t00", "t01", "t02", "t03", "t04"]
    assert client.requests == [0, 2, 4]
    assert client.order_by == "__name__"
    print(f"   ✅ {len(snapshots)} documentos en {len(client.requests)} páginas")


def test_fetch_orders_by_document_id():
    """La consulta se ordena por id de documento para que start_after funcione."""
    client = FakeClient({"tags": _tags(1)})
    firestore_reader.fetch_collection(client, "tags", page_size=500)

    assert client.order_by == FieldPath.document_id() == "__name__"


def test_fetch_exact_multiple_of_page_size():
    """Última página completa: hace falta una página vacía para terminar."""
    print("\n🔍 Test: total múltiplo del tamaño de página")

    client = FakeClient({"tags": _tags(4)})
    snapshots = firestore_reader.fetch_collection(client, "tags", page_size=2)

    assert len(snapshots) == 4
    assert client.requests == [0, 2, 4]
    print("   ✅ 4 documentos, 3 páginas")


def test_fetch_empty_collection():
    client = FakeClient({})
    assert firestore_reader.fetch_collection(client, "users", page_size=500) == []
    assert client.requests == [0]


def test_fetch_fails_mid_stream():
    print("\n🔍 Test: error de API en la segunda página")

    client = FakeClient(
        {"tags": _tags(5)}, fail_on_page=1, error=ServiceUnavailable("down")
    )
    try:
        firestore_reader.fetch_collection(client, "tags", page_size=2)
        assert False, "Debería lanzar RetrievalError"
    except RetrievalError as e:
        assert "tags" in str(e)
        assert isinstance(e.__cause__, ServiceUnavailable)
        print(f"   ✅ {e}")


def test_fetch_rejects_invalid_page_size():
    try:
        firestore_reader.fetch_collection(FakeClient({}), "tags", page_size=0)
        assert False, "Debería lanzar ValueError"
    except ValueError:
        pass


def test_fetch_firestore_data_closes_client():
    print("\n🔍 Test: el cliente se cierra siempre")

    ok_client = FakeClient({"users": [FakeSnapshot("u1", {"email": "a@b.com"})]})
    failing_client = FakeClient(
        {"users": _tags(1)}, fail_on_page=0, error=ServiceUnavailable("down")
    )
    original = firestore_reader.connect_to_firestore

    try:
        firestore_reader.connect_to_firestore = lambda cfg: ok_client
        snapshots = firestore_reader.fetch_firestore_data("users", {}, 10)
        assert len(snapshots) == 1
        assert ok_client.closed

        firestore_reader.connect_to_firestore = lambda cfg: failing_client
        try:
            firestore_reader.fetch_firestore_data("users", {}, 10)
            assert False, "Debería lanzar RetrievalError"
        except RetrievalError:
            pass
        assert failing_client.closed
    finally:
        firestore_reader.connect_to_firestore = original

    print("   ✅ close() llamado en éxito y en error")


def test_connect_with_missing_credentials():
    try:
        firestore_reader.connect_to_firestore(
            {"project_id": "demo", "credentials_path": "/no/existe/sa.json"}
        )
        assert False, "Debería lanzar RetrievalError"
    except RetrievalError as e:
        assert "Firestore" in str(e)


def run_all_tests():
    """Ejecuta todos los tests de lectura."""
    print("=" * 70)
    print("🧪 TESTS DE LECTURA DE FIRESTORE")
    print("=" * 70)

    tests = [
        test_fetch_exhausts_all_pages,
        test_fetch_orders_by_document_id,
        test_fetch_exact_multiple_of_page_size,
        test_fetch_empty_collection,
        test_fetch_fails_mid_stream,
        test_fetch_rejects_invalid_page_size,
        test_fetch_firestore_data_closes_client,
        test_connect_with_missing_credentials,
    ]

    errors = []

    for test_func in tests:
        try:
            test_func()
        except AssertionError as e:
            errors.append(f"{test_func.__name__}: {e}")

    print("\n" + "=" * 70)

    if not errors:
        print("✅ TODOS LOS TESTS PASARON")
        return True
    else:
        print(f"❌ {len(errors)} ERRORES ENCONTRADOS")
        for error in errors:
            print(f"   - {error}")
        return False


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
