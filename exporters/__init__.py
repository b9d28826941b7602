"""
Exportadores que transforman colecciones de Firestore en sentencias SQL.

Cada exportador implementa la interfaz BaseExporter y se carga dinámicamente
en runtime según la colección a exportar.

Estructura:
    base.py: Clase abstracta BaseExporter y decodificación de campos
    dialects.py: Sintaxis por dialecto SQL (mysql, postgres)
    users.py: Exportador para la colección users
    stores.py: Exportador para la colección shops
    tags.py: Exportador para la colección tags

Los exportadores son instanciados por load_exporter_for_collection() en
firesql.py usando importlib.import_module() para carga dinámica.

Interfaz requerida (ver BaseExporter):
    - extract_record(snapshot)
    - row_values(record)
"""
