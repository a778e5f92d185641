"""The fixed figure catalogue and the batch driver that renders it.

Each figure is pure configuration: a polynomial, display ranges and the
x-coordinates of the highlighted shares.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel

from shamir_plots.exceptions import BatchRenderError, FigureNotFoundError, RenderError
from shamir_plots.logger import Logger, session_logger
from shamir_plots.plot.chart_params import ChartParams
from shamir_plots.plot.render.renderer import ChartRenderer
from shamir_plots.plot.render.summary import RenderSummary
from shamir_plots.polynomial import Polynomial, monomial

SHAMIR_POLYNOMIAL = Polynomial([2, -3, 2, 5])


class FigureSpec(BaseModel):
    """A named figure and the file it is written to."""

    name: str
    filename: str
    params: ChartParams


def _figure(
    name: str,
    title: str,
    polynomial: Polynomial,
    x_range: tuple[float, float],
    y_range: tuple[float, float],
    sample_xs: List[float],
    show_secret: bool,
) -> FigureSpec:
    return FigureSpec(
        name=name,
        filename=f"{name}.svg",
        params=ChartParams(
            title=title,
            function=polynomial,
            function_label=polynomial.label(),
            x_range=x_range,
            y_range=y_range,
            sample_xs=sample_xs,
            show_secret=show_secret,
        ),
    )


FIGURES: tuple[FigureSpec, ...] = (
    _figure(
        "line",
        "Two Points are Uniquely Determined by a Line",
        monomial(1),
        (2.5, 4.5),
        (2.0, 4.5),
        [3.0, 4.0],
        False,
    ),
    _figure(
        "quadratic",
        "Three Points are Uniquely Determined by a Parabola",
        monomial(2),
        (-5.1, 5.1),
        (-1.0, 26.0),
        [-4.0, 1.0, 4.0],
        False,
    ),
    _figure(
        "cubic",
        "Four Points are Uniquely Determined by a Cubic",
        monomial(3),
        (-2.5, 2.5),
        (-20.0, 20.0),
        [-2.0, -1.0, 1.0, 2.0],
        False,
    ),
    _figure(
        "shamir",
        "Shamir's Secret Sharing",
        SHAMIR_POLYNOMIAL,
        (-2.1, 2.4),
        (-30.0, 20.0),
        [-2.0, -1.0, 1.0, 2.0],
        True,
    ),
    _figure(
        "shamir_alternate_single",
        "Shamir's Secret Sharing: Alternate Single Share",
        SHAMIR_POLYNOMIAL,
        (-1.1, 3.4),
        (-30.0, 60.0),
        [-1.0, 1.0, 2.0, 3.0],
        True,
    ),
    _figure(
        "shamir_alternate_multiple",
        "Shamir's Secret Sharing: Alternate Multiple Shares",
        SHAMIR_POLYNOMIAL,
        (-2.7, 3.0),
        (-70.0, 60.0),
        [-2.5, -1.5, 1.5, 2.5],
        True,
    ),
)

_FIGURES_BY_NAME: Dict[str, FigureSpec] = {figure.name: figure for figure in FIGURES}


def list_figures() -> list[str]:
    """Get figure names in rendering order."""
    return [figure.name for figure in FIGURES]


def get_figure(name: str) -> FigureSpec:
    """Get a figure by name.

    Raises:
        FigureNotFoundError: If no figure has that name
    """
    figure = _FIGURES_BY_NAME.get(name)
    if figure is None:
        raise FigureNotFoundError(name, list_figures())
    return figure


def render_figures(
    output_dir: Union[str, Path],
    names: Optional[Iterable[str]] = None,
    keep_going: bool = False,
    renderer: Optional[ChartRenderer] = None,
    logger: Optional[Logger] = None,
) -> List[RenderSummary]:
    """Render figures one after another into ``output_dir``.

    ``output_dir`` must exist. By default the first failure aborts the batch.
    With ``keep_going`` every figure is attempted and a ``BatchRenderError``
    naming the failures is raised at the end.

    Args:
        output_dir: Existing directory the SVG files are written to
        names: Figure names to render (default: the whole catalogue)
        keep_going: Continue past failed figures
        renderer: Renderer to use (default: a new ChartRenderer)
        logger: Logger for batch progress

    Returns:
        One RenderSummary per successfully rendered figure, in order

    Raises:
        FigureNotFoundError: If a requested name is unknown (before rendering)
        RenderError: On the first failure when keep_going is False
        BatchRenderError: After the batch when keep_going is True and any failed
    """
    logger = logger or session_logger
    renderer = renderer or ChartRenderer(logger=logger)
    output_dir = Path(output_dir)

    figures = [get_figure(name) for name in names] if names is not None else list(FIGURES)

    summaries: List[RenderSummary] = []
    failures: Dict[str, RenderError] = {}
    for figure in figures:
        try:
            summaries.append(renderer.render(output_dir / figure.filename, figure.params))
        except RenderError as e:
            if not keep_going:
                raise
            logger.warning("Figure failed, continuing", figure=figure.name, error=str(e))
            failures[figure.name] = e

    logger.info(
        "Batch completed",
        output_dir=str(output_dir),
        rendered=len(summaries),
        failed=len(failures),
    )
    if failures:
        raise BatchRenderError(failures)
    return summaries
