"""📦 core/ — Building blocks universales del sistema

✨ ¿Qué pertenece aquí?
   • Value Objects lógicos reusables en CUALQUIER dominio:
     - NonEmptyString
   • Tipos primitivos validados
   • Helpers genéricos SIN dependencia de negocio

🚫 ¿Qué NO pertenece aquí?
   • Conceptos de verificación (CheckDefinition, VerificationResult)
   • Reglas de negocio (existencia, ausencia, contenido)

✅ Dónde poner lo específico del dominio:
   → modules/{bounded_context}/domain/

💡 Principio preventivo:
   Si no podrías reusar este código en un sistema de pagos O un e-commerce,
   probablemente NO pertenece a core/.
"""
