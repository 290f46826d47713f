"""Parenthesized parameter list for convention-routed functions.

Functions take their arguments in the URL, rendered in metadata order:

    GetTopSellers(count={count})
    Rename(newName='{newName}')        (client template, string parameter)

Actions take their arguments in the request payload and render nothing.
Token names use the caller's route-level parameter name when the implementing
action renamed a parameter.
"""

from routegen.domain.entities import Operation, OperationContext
from routegen.routing.constants import KEY_SEPARATOR
from routegen.routing.expansion import expand_parameter_token


def build_parameter_list(context: OperationContext, operation: Operation) -> str:
    """Render the parameter list of an operation.

    Args:
        context: Operation context (generation kind, descriptions, options).
        operation: Operation whose declared parameters are rendered.

    Returns:
        "(a={a},b={b})" for functions with parameters, "" otherwise.
    """
    if not operation.is_function:
        return ""

    parameters = operation.declared_parameters()

    if not parameters:
        return ""

    arguments = [
        "{}={}".format(
            parameter.name,
            expand_parameter_token(
                context,
                parameter.semantic_type,
                context.route_parameter_name(parameter.name),
            ),
        )
        for parameter in parameters
    ]

    return f"({KEY_SEPARATOR.join(arguments)})"
