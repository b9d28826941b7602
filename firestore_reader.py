"""
Lectura de colecciones completas desde Firestore.

Recorre la colección con paginación por cursor: la consulta se ordena por
id de documento y cada página arranca después del último snapshot de la
página anterior (start_after). Una página más corta que page_size es la
señal de "no hay más resultados".

Uso:
    snapshots = fetch_firestore_data('users', config.FIRESTORE_CONFIG, 500)
"""

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import firestore
from google.cloud.firestore_v1.field_path import FieldPath

from errors import RetrievalError


def connect_to_firestore(firestore_config):
    """
    Construye un cliente de Firestore autenticado con la cuenta de servicio.

    Args:
        firestore_config: Dict con 'project_id' y 'credentials_path'

    Returns:
        google.cloud.firestore.Client

    Raises:
        RetrievalError: Si no se pueden cargar las credenciales o crear el cliente
    """
    try:
        return firestore.Client.from_service_account_json(
            firestore_config["credentials_path"],
            project=firestore_config["project_id"],
        )
    except (OSError, ValueError, GoogleAuthError) as e:
        raise RetrievalError(f"No se pudo crear el cliente de Firestore: {e}") from e


def fetch_collection(client, collection_name, page_size):
    """
    Obtiene TODOS los documentos de una colección, página por página.

    Args:
        client: Cliente de Firestore
        collection_name: Nombre de la colección
        page_size: Documentos por página (>= 1)

    Returns:
        list: DocumentSnapshots en el orden que entrega Firestore

    Raises:
        RetrievalError: Si falla cualquier página
    """
    if page_size < 1:
        raise ValueError(f"page_size debe ser >= 1 (recibido {page_size})")

    query = (
        client.collection(collection_name)
        .order_by(FieldPath.document_id())
        .limit(page_size)
    )

    snapshots = []
    last_snapshot = None

    try:
        while True:
            page_query = query
            if last_snapshot is not None:
                page_query = query.start_after(last_snapshot)

            page = list(page_query.stream())
            snapshots.extend(page)

            if len(page) < page_size:
                break

            last_snapshot = page[-1]
    except GoogleAPIError as e:
        raise RetrievalError(
            f"Error paginando '{collection_name}' "
            f"(después de {len(snapshots)} documentos): {e}"
        ) from e

    return snapshots


def fetch_firestore_data(collection_name, firestore_config, page_size):
    """
    Abre un cliente, lee la colección completa y cierra el cliente.

    El cliente se crea y se libera en cada llamada; las colecciones se
    exportan de forma independiente.
    """
    client = connect_to_firestore(firestore_config)
    try:
        return fetch_collection(client, collection_name, page_size)
    finally:
        client.close()
