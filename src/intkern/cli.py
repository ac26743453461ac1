import logging
from collections.abc import Callable
from typing import Annotated, Any

import srsly
import typer

from intkern.core.errors import EmptySequenceError, IntegerDivisionByZeroError
from intkern.kernels.base import IntegerKernel
from intkern.kernels.registry import available_kinds, get_kernel

app = typer.Typer(help="Evaluate fixed-width integer kernels.")
_LOGGER = logging.getLogger(__name__)

_UNARY_OPS = frozenset(
    {"abs", "absu", "fibonacci", "is_2_power", "is_odd", "sign", "sign_bit"}
)
_BINARY_OPS = frozenset(
    {"copysign", "divmod", "gcd", "lcm", "max", "min", "min_max", "pow"}
)
_VARIADIC_OPS = frozenset({"maxs", "min_maxs", "mins"})
_SEQUENCE_OPS = frozenset(
    {
        "max_slice",
        "max_slice_checked",
        "min_max_slice",
        "min_max_slice_checked",
        "min_slice",
        "min_slice_checked",
    }
)
_ALL_OPS = _UNARY_OPS | _BINARY_OPS | _VARIADIC_OPS | _SEQUENCE_OPS


def _get_kernel_or_fail(kind: str) -> IntegerKernel:
    try:
        return get_kernel(kind)
    except ValueError as err:
        raise typer.BadParameter(str(err), param_hint="KIND") from err


def _resolve_operation(
    kernel: IntegerKernel, operation: str
) -> Callable[..., Any]:
    if operation not in _ALL_OPS:
        valid = ", ".join(sorted(_ALL_OPS))
        raise typer.BadParameter(
            f"Unknown operation '{operation}'. Valid operations: {valid}",
            param_hint="OP",
        )
    fn = getattr(kernel, operation, None)
    if fn is None:
        raise typer.BadParameter(
            f"Operation '{operation}' is not defined for kind "
            f"'{kernel.kind.name}'",
            param_hint="OP",
        )
    return fn


def _check_arity(operation: str, values: list[int]) -> None:
    expected: str | None = None
    if operation in _UNARY_OPS and len(values) != 1:
        expected = "exactly 1 argument"
    elif operation in _BINARY_OPS and len(values) != 2:
        expected = "exactly 2 arguments"
    elif operation in _VARIADIC_OPS and not values:
        expected = "at least 1 argument"
    if expected is not None:
        raise typer.BadParameter(
            f"'{operation}' takes {expected}, got {len(values)}",
            param_hint="ARGS",
        )


def _to_json_value(result: Any) -> Any:
    if hasattr(result, "_asdict"):
        return result._asdict()
    if isinstance(result, tuple):
        return list(result)
    return result


@app.command()
def kinds() -> None:
    """List the built-in integer kinds."""
    for name in available_kinds():
        kind = get_kernel(name).kind
        signedness = "signed" if kind.signed else "unsigned"
        typer.echo(f"{kind.name}: {kind.bits} bits, {signedness}")


@app.command()
def info(
    kind: Annotated[str, typer.Argument(help="Kind name, e.g. u8 or i64")],
) -> None:
    """Show the size and bounds of a kind as JSON."""
    kernel = _get_kernel_or_fail(kind)
    payload = {
        "name": kernel.kind.name,
        "size": kernel.size,
        "bit_size": kernel.bit_size,
        "signed": kernel.signed,
        "minimal": kernel.minimal,
        "maximal": kernel.maximal,
    }
    typer.echo(srsly.json_dumps(payload))


@app.command(
    name="eval",
    context_settings={"ignore_unknown_options": True},
)
def eval_operation(
    kind: Annotated[str, typer.Argument(help="Kind name, e.g. u8 or i64")],
    operation: Annotated[str, typer.Argument(help="Operation name")],
    args: Annotated[
        list[int] | None,
        typer.Argument(help="Integer arguments (negative values allowed)"),
    ] = None,
) -> None:
    """Evaluate one kernel operation and print the result as JSON."""
    kernel = _get_kernel_or_fail(kind)
    fn = _resolve_operation(kernel, operation)
    values = list(args or [])
    _check_arity(operation, values)
    _LOGGER.debug("eval %s.%s%s", kernel.kind.name, operation, values)

    try:
        if operation in _SEQUENCE_OPS:
            result = fn(values)
        else:
            result = fn(*values)
    except (IntegerDivisionByZeroError, EmptySequenceError) as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    typer.echo(srsly.json_dumps(_to_json_value(result)))
