"""
Suite de tests para el sistema de exportación Firestore → SQL.

Los tests NO se conectan a Firestore, solo validan:
- Sintaxis de código Python
- Implementación correcta de interfaces
- Formato exacto de las sentencias generadas
- Paginación, configuración y escritura del archivo de salida
"""
