"""Starter project config written by ``ddlbind init``.

Only the generator options a project is likely to change are written
as active values; the rest appear as commented defaults.
"""

from pathlib import Path

from ddlbind.config.models import GeneratorConfig

_DEFAULTS = GeneratorConfig()


def _option(lines: list[str], key: str, value: object, default: object) -> None:
    """Write active if non-default, else as comment."""
    rendered = str(value).lower() if isinstance(value, bool) else value
    if value != default:
        lines.append(f"  {key}: {rendered}")
    else:
        lines.append(f"  # {key}: {rendered}")


def write_user_config(path: Path, config: GeneratorConfig | None = None) -> None:
    """Write ddlbind.yaml with helpful comments.

    Args:
        path: Path to write ddlbind.yaml
        config: Generator values (uses defaults if None)
    """
    cfg = config or GeneratorConfig()

    lines = [
        "# ddlbind configuration",
        "# Every key can be overridden with DDLBIND__<SECTION>__<KEY> env vars.",
        "",
        "generator:",
        "  # Directory holding *.sql schema files (CREATE TABLE / CREATE TYPE ... AS ENUM)",
        f"  input_dir: {cfg.input_dir}",
        "",
        "  # Generated package. It is deleted and recreated on every run.",
        f"  output_dir: {cfg.output_dir}",
        "",
        "  # Module (inside the output directory) holding generated enum classes",
    ]
    _option(lines, "custom_types_module", cfg.custom_types_module, _DEFAULTS.custom_types_module)
    lines += [
        "",
        "  # Where /* @use <Type> */ override types are imported from.",
    ]
    _option(lines, "overrides_module", cfg.overrides_module, _DEFAULTS.overrides_module)
    _option(lines, "overrides_dir", cfg.overrides_dir, _DEFAULTS.overrides_dir)
    lines.append("")

    lines.append("  # Record key style: camel (role_names -> roleNames) or snake")
    _option(lines, "naming", cfg.naming, _DEFAULTS.naming)
    lines.append("")

    lines.append("  # Fail on statements other than CREATE TABLE / CREATE TYPE ... AS ENUM")
    _option(lines, "strict", cfg.strict, _DEFAULTS.strict)
    lines.append("")

    lines.append("# Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL")
    lines.append("# logging:")
    lines.append("#   level: INFO")
    lines.append("")

    path.write_text("\n".join(lines))
