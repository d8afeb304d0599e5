from __future__ import annotations

"""Command line interface for ringcalc using Typer."""

from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import typer
from pydantic import ValidationError

from ._typer import bad_parameter
from .config import Settings, load_settings
from .core import INTEGRATION_METHODS, RingCalcError
from .functions import SampleFunction, available_functions, get_function
from .pipeline import build_store, fill_store, run as run_pipeline
from .utils.logging import get_logger

app = typer.Typer(help="Numerical integral and derivative over a circular sample store")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys:
        fields = getattr(type(current), "model_fields", {})
        if key not in fields:
            raise typer.BadParameter(f"unknown configuration key: {'.'.join(keys)}")
        current = getattr(current, key)


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


def _resolve_function(ctx: typer.Context, name: Optional[str], cfg: Settings) -> SampleFunction:
    name = name or cfg.sampling.function
    logger.debug("sampling function %s", name)
    try:
        return get_function(name)
    except KeyError as exc:
        bad_parameter(
            f"unknown function {name!r}; available: {', '.join(available_functions())}",
            ctx=ctx,
            param_hint="--function",
            cause=exc,
        )


def _fmt(value: float, precision: int) -> str:
    return f"{value:.{precision}f}"


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. sampling.resolution_factor=10",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Initialise the Typer context with validated settings."""

    logging.getLogger("ringcalc").setLevel(logging.DEBUG if verbose else logging.INFO)

    if config is not None and not config.exists():
        raise typer.BadParameter(f"configuration file not found: {config}")

    try:
        if config is not None:
            settings = load_settings(config)
        elif isinstance(ctx.obj, Settings):
            settings = ctx.obj
        else:
            settings = Settings()
    except (RuntimeError, TypeError, ValidationError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"failed to load configuration: {exc}") from exc

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                raise typer.BadParameter(
                    "overrides must be of the form --set section.key=value"
                )
            key, raw_value = override.split("=", 1)
            if not key:
                raise typer.BadParameter("override key cannot be empty")
            keys = key.split(".")
            _ensure_path(settings, keys)
            _apply_override(data, keys, _parse_override_value(raw_value))
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            raise typer.BadParameter(f"invalid configuration override: {exc}") from exc

    ctx.obj = settings


@app.command()
def run(
    ctx: typer.Context,
    function: Optional[str] = typer.Option(None, "--function", "-f"),
    method: Optional[str] = typer.Option(None, "--method", "-m"),
    show_all: Optional[bool] = typer.Option(
        None, "--all/--display", help="Print the derivative at every sample"
    ),
) -> None:
    """Sample a function, then print its integral and derivatives.

    By default one derivative is printed per unit of ``x``; ``--all`` prints
    the estimate at every sample in the store.
    """

    cfg: Settings = ctx.obj
    if method is not None and method not in INTEGRATION_METHODS:
        bad_parameter(
            f"unknown method {method!r}; expected one of {', '.join(INTEGRATION_METHODS)}",
            ctx=ctx,
            param_hint="--method",
        )
    func = _resolve_function(ctx, function, cfg)
    if show_all is None:
        show_all = cfg.report.show_all
    precision = cfg.report.precision

    try:
        result = run_pipeline(cfg, func, method=method)
    except RingCalcError as exc:
        bad_parameter(f"run aborted: {exc}", ctx=ctx, cause=exc)

    typer.echo(f"integral: {result.integral:f}")
    if show_all:
        for i, value in enumerate(result.derivatives):
            x = (i + 1) * result.dt
            typer.echo(f"derivative at {_fmt(x, precision)}: {_fmt(value, precision)}")
    else:
        for point in result.points:
            typer.echo(f"derivative at {_fmt(point.x, precision)}: {_fmt(point.value, precision)}")


@app.command()
def integrate(
    ctx: typer.Context,
    function: Optional[str] = typer.Option(None, "--function", "-f"),
) -> None:
    """Print the result of every integration rule for the sampled function."""

    cfg: Settings = ctx.obj
    func = _resolve_function(ctx, function, cfg)
    dt = cfg.sampling.dt
    try:
        with build_store(cfg) as store:
            fill_store(store, func, dt)
            results = {name: rule(store, dt) for name, rule in INTEGRATION_METHODS.items()}
    except RingCalcError as exc:
        bad_parameter(f"run aborted: {exc}", ctx=ctx, cause=exc)

    for name, value in results.items():
        typer.echo(f"{name}: {value:f}")


@app.command()
def dump(
    ctx: typer.Context,
    function: Optional[str] = typer.Option(None, "--function", "-f"),
    precision: int = typer.Option(3, "--precision", "-p", min=0),
) -> None:
    """Fill the store and print its contents in slot order."""

    cfg: Settings = ctx.obj
    func = _resolve_function(ctx, function, cfg)
    try:
        with build_store(cfg) as store:
            fill_store(store, func, cfg.sampling.dt)
            text = store.format_contents(precision)
    except RingCalcError as exc:
        bad_parameter(f"run aborted: {exc}", ctx=ctx, cause=exc)
    typer.echo(text)


@app.command()
def functions() -> None:
    """List the registered sample functions."""

    for name in available_functions():
        typer.echo(name)


def main() -> None:
    """Execute the Typer application."""

    get_logger("ringcalc")
    app()


if __name__ == "__main__":
    main()
