from boxlax_tracker.stats.density import estimate_goal_density
from boxlax_tracker.tracking.geometry import GoalPoint
from boxlax_tracker.ui.plots import create_floor_shots_figure, create_goal_heatmap_figure
from boxlax_tracker.tracking.models import ShotOutcome


def _path_shapes(fig):
    return [shape for shape in fig.layout.shapes if shape.type == "path"]


def test_heatmap_draws_one_shape_per_band_polygon(make_shot) -> None:
    shots = [
        make_shot(ShotOutcome.GOAL, placement=GoalPoint(30.0, 30.0)),
        make_shot(ShotOutcome.GOAL, placement=GoalPoint(35.0, 32.0)),
        make_shot(ShotOutcome.SAVE, placement=GoalPoint(70.0, 70.0)),
    ]
    bands = estimate_goal_density(shots)

    fig = create_goal_heatmap_figure(shots, bands=bands)

    paths = _path_shapes(fig)
    assert len(paths) == sum(len(band.polygons) for band in bands)
    assert [shape.opacity for shape in paths] == sorted(shape.opacity for shape in paths)
    assert all(shape.path.startswith("M ") and shape.path.endswith("Z") for shape in paths)
    markers = fig.data[0]
    assert list(markers.text) == ["1", "2", "3"]
    assert fig.layout.title.text == "Goal density"


def test_heatmap_without_goals_has_no_bands(make_shot) -> None:
    shots = [make_shot(ShotOutcome.SAVE), make_shot(ShotOutcome.SAVE, placement=None)]

    fig = create_goal_heatmap_figure(shots)

    assert _path_shapes(fig) == []
    assert list(fig.data[0].text) == ["1"]
    assert fig.layout.title.text == "Shot placement"


def test_floor_figure_numbers_every_origin(make_shot) -> None:
    shots = [make_shot(ShotOutcome.SAVE), make_shot(ShotOutcome.GOAL, placement=None)]

    fig = create_floor_shots_figure(shots)

    assert list(fig.data[0].text) == ["1", "2"]
    assert list(fig.data[0].marker.color) == ["#10b981", "#ef4444"]


def test_floor_figure_empty() -> None:
    assert len(create_floor_shots_figure([]).data) == 0
