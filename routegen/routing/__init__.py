"""Route template synthesis.

Components (leaf first):
- quoting: Literal quoting prefixes per Python type
- tokens: ``{identifier}`` tokenizer and constraint stripping
- expansion: Token decoration shared by keys and parameters
- keys: Entity key segment
- navigation: Navigation property suffix
- parameters: Function parameter list
- array_fixup: Collection bracket fix-up for declared templates
- query: Query string suffix
- path: Path composition
- builder: Orchestration
"""
