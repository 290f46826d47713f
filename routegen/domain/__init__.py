"""Domain layer - the operation description consumed by the builder.

This layer contains the immutable metadata model (entity sets, operations,
parameter descriptions) and the semantic type catalog. The domain layer has
NO dependencies on any framework or infrastructure - it is pure Python.

Structure:
- enums/: Action type, delimiter style, generation kind, binding source, type kind
- entities/: OperationContext and the metadata it references
- types.py: SemanticType, spatial bases, marker types, EDM primitive catalog
- protocols/: LoggerProtocol
"""
