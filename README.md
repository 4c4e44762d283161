# gridslamlog

Building blocks for grid-based laser SLAM, in plain Python with no
third-party dependencies.

## What is in it

- `gridslamlog.geometry`: `Point`, `OrientedPoint`, `normalize_angle` and
  `FSRMovement` (forward / sideward / rotate motions), with
  `compose_moves`, `move_point`, `move_between_points`, `invert_move` and
  `frame_transformation`.
- `gridslamlog.sensors`: `Sensor`, `OdometrySensor`, `RangeSensor` (with
  `Beam`s and `RangeSensor.uniform`), and the readings `SensorReading`,
  `OdometryReading` and `RangeReading`. A `RangeReading` offers
  `raw_view(density)`, `active_beams(density)` and `cartesian_form(max_range)`.
- `gridslamlog.configuration`: `CarmenConfiguration` reads the `PARAM` lines
  and laser beam counts of a CARMEN log and builds a sensor map
  (`ODOM`, `TRUEPOS`, and, when switched on, `SONAR`, `FLASER`,
  `ROBOTLASER1`, `RLASER`, `ROBOTLASER2`) with `compute_sensor_map()`.
- `gridslamlog.sensorlog`: `SensorLog` loads all odometry and laser records
  of a log into a list; `bounding_box()` gives the first scan pose and the
  box spanned by all poses.
- `gridslamlog.sensorstream`: `InputSensorStream` parses readings line by
  line; `LogSensorStream` replays a loaded `SensorLog` and can be rewound.
- `gridslamlog.tools`: `load_log`, `rdk_lines`, `convert_scanstudio`,
  `plot_frames`, `pose_lines` and the command entry points.
- Numerics:
  - `eigen3.eigen_decomposition` for symmetric 3x3 matrices (eigenvalues
    ascending, eigenvectors as columns);
  - `gridline.grid_line` / `grid_line_core` for Bresenham grid lines;
  - `stat`: `ran_gaussian`, `sample_gaussian`, `eval_log_gaussian` and
    `Gaussian3`;
  - `datasmoother.DataSmoother`: Parzen-window smoothing, sampling and
    comparison with a Gaussian;
  - `matrix.Matrix` with `det`, `inv`, `transpose` and arithmetic, raising
    `NotInvertibleMatrixError`, `IncompatibleMatrixError` or
    `NotSquareMatrixError`;
  - `particlefilter`: `resample`, `neff`, `normalize_weights`,
    `to_normal_form`, `to_log_form`, `repeat_indexes`, `repeat_indexes_into`,
    `rle`, `evolve` and `auxiliary_evolve`;
  - `boundingbox.OrientedBoundingBox` along the principal axes of a point set;
  - `pgm.write_pgm` writing a grid of values in [0, 1] as a binary PGM;
  - `alignment.lu_milios_step`, the closed-form rigid alignment of two
    matched point sets.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

Load a CARMEN log and print the pose and time of each laser scan:

```python
from gridslamlog.tools import load_log, pose_lines

log = load_log("robot.log")
for line in pose_lines(log):
    print(line)
```

Compose planar motions:

```python
from gridslamlog.geometry import OrientedPoint, move_between_points, move_point

start = OrientedPoint(0.0, 0.0, 0.0)
goal = OrientedPoint(1.0, 2.0, 0.5)
motion = move_between_points(start, goal)
reached = move_point(start, motion)  # equals goal up to rounding
```

Trace the cells a beam crosses on a grid:

```python
from gridslamlog.gridline import grid_line

cells = grid_line((0, 0), (5, 2))  # [(0, 0), (1, 0), ..., (5, 2)]
```

## Command-line tools

`log-test LOGFILE` loads a CARMEN log and prints, for every laser reading,
`x y theta time`. The number of readings goes to standard error.

`rdk2carmen LOGFILE [OUTFILE]` writes each laser reading as the sensor name,
the beam count, the ranges and the position scaled from millimetres to
metres, and the heading, to `OUTFILE` or to standard output.

`scanstudio2carmen SCANFILE CARMENFILE` converts a ScanStudio scan file
(`RobotPos:`, `NumPoints:` and `DATA` blocks) into `FLASER` records.

`log-plot LOGFILE` prints a gnuplot script that draws every third laser scan
into its own GIF frame (`frame-00000.gif`, ...), keeping only points within
two metres. Pipe it into gnuplot to render the frames.

## What it does not do

The package reads logs, models sensors and offers numerical helpers. It does
not build occupancy grid maps, does not run scan matching, and has no
complete SLAM loop; those have to be written on top of these pieces.