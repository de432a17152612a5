"""📦 modules/ — Bounded contexts específicos del negocio

✨ Estado actual:
   • verification/ → Verificación declarativa de archivos en el build

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/         → Value Objects, agregado de resultados y reglas puras
   • application/    → Motor de verificación y casos de uso
   • infrastructure/ → Adaptadores concretos (disco, YAML/JSON/XML, reportes)
   • entry_points/   → CLI (adaptador del build anfitrión)
"""
