"""Typer CLI for previewing chart labels."""

from __future__ import annotations

from pathlib import Path

import plotly.graph_objects as go
import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chart_label.chart_value import ChartValue
from chart_label.colors import ThemeColorResolver
from chart_label.exceptions import ChartLabelError
from chart_label.label import ChartLabel
from chart_label.logging_setup import setup_logging
from chart_label.render import add_label
from chart_label.settings import DEFAULT_CONFIG_PATH, LabelSettings
from chart_label.styling import PRESET_STYLES, LabelType

console = Console()
app = typer.Typer(
    name="chart-label",
    help="Preview reactive chart labels.",
    no_args_is_help=True,
)


def _padding_text(padding) -> str:
    return f"{padding.top:g}/{padding.leading:g}/{padding.bottom:g}/{padding.trailing:g}"


@app.command()
def preview(
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c", help="Path to label YAML"),
    title: str = typer.Option(None, "--title", help="Chart title"),
    value: float = typer.Option(0.0, "--value", help="Selected data point value"),
    text: str = typer.Option("", "--text", help="Selected data point legend"),
    interacting: bool = typer.Option(
        True, "--interacting/--idle", help="Whether a data point is selected"
    ),
    legend: bool = typer.Option(None, "--legend/--no-legend", help="Append the point legend"),
    delimiter: str = typer.Option(None, "--delimiter", help="Text between value and legend"),
    label_type: LabelType = typer.Option(None, "--type", help="Label preset"),
    value_format: str = typer.Option(None, "--format", help="printf-style value pattern"),
    html: Path = typer.Option(None, "--html", help="Also write the label on a Plotly figure here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Render one label for the given chart state."""
    setup_logging(verbose=verbose)

    try:
        settings = LabelSettings.from_yaml(
            config,
            title=title,
            show_legend=legend,
            delimiter=delimiter,
            label_type=label_type,
            value_format=value_format,
        )
    except ChartLabelError as e:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    chart_value = ChartValue()
    label = ChartLabel(
        settings.title,
        settings.label_type,
        settings.value_format,
        chart_value=chart_value,
        config=settings.build_config(),
        color_resolver=ThemeColorResolver(settings.appearance),
    )
    with label:
        chart_value.update(value, text, interacting)
        rendered = label.render()
        if html:
            fig = add_label(go.Figure(), label)
            html.parent.mkdir(parents=True, exist_ok=True)
            fig.write_html(str(html))
    logger.debug("Rendered {r}", r=rendered)

    table = Table(title="Chart label", show_lines=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("text", escape(rendered.text))
    table.add_row("type", settings.label_type.value)
    table.add_row("size", f"{rendered.size:g}")
    table.add_row("padding", _padding_text(rendered.padding))
    table.add_row("color", rendered.color)
    console.print(table)
    if html:
        console.print(f"  Output: {html}")


@app.command()
def styles() -> None:
    """List the preset label styles."""
    table = Table(title="Label presets")
    table.add_column("Type", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Padding (t/l/b/tr)")
    table.add_column("Color role")
    for label_type, style in PRESET_STYLES.items():
        table.add_row(
            label_type.value,
            f"{style.size:g}",
            _padding_text(style.padding),
            style.color.value,
        )
    console.print(table)
