# fusionahrs

An attitude and heading reference system (AHRS). It combines gyroscope,
accelerometer and magnetometer measurements into one estimate of orientation
relative to the Earth. It uses only the standard library.

## What it provides

- `fusionahrs.ahrs.Ahrs` runs the fusion algorithm. It has three update
  methods:
  - `update(gyroscope, accelerometer, magnetometer, delta_time)` uses all
    three sensors.
  - `update_no_magnetometer(gyroscope, accelerometer, delta_time)` works
    without a magnetometer. While the algorithm is initialising, it holds the
    heading at zero.
  - `update_external_heading(gyroscope, accelerometer, heading, delta_time)`
    takes the heading from another source.

  Its properties are `quaternion` (settable), `gravity`,
  `linear_acceleration`, `earth_acceleration`, `internal_states`, `flags` and
  `settings`. The `settings` property is settable and returns a copy.
  `set_heading(heading)` rotates the orientation to a given heading.
  `reset()` restarts the algorithm and keeps the settings.
- `fusionahrs.states` holds the algorithm's configuration and its
  diagnostics:
  - `Settings` has the fields `convention`, `gain`, `gyroscope_range`,
    `acceleration_rejection`, `magnetic_rejection` and
    `recovery_trigger_period`.
  - `Flags` and `InternalStates` are read-only snapshots.
- `fusionahrs.offset.Offset(sample_rate)` corrects the gyroscope offset while
  the program runs. After the corrected rate has stayed within 3 °/s on every
  axis for 5 seconds of samples, it starts to adapt its offset estimate. The
  estimate is available as `gyroscope_offset`.
- `fusionahrs.compass.calculate_heading(convention, accelerometer,
  magnetometer)` is a tilt-compensated compass. It returns the heading in
  degrees.
- `fusionahrs.calibration` applies the sensor calibration models:
  - `calibrate_inertial` applies misalignment, sensitivity and offset.
  - `calibrate_magnetic` applies soft iron and hard iron correction.
- `fusionahrs.axes.axes_swap(sensor, alignment)` aligns the sensor axes with
  the body axes. `alignment` is an `AxesAlignment` member, such as `PYNXPZ`
  for +Y-X+Z.
- `fusionahrs.convention.Convention` selects the Earth axes convention:
  `NWU`, `ENU` or `NED`.
- `fusionahrs.frames` derives gravity, magnetic reference, linear acceleration
  and Earth acceleration from a quaternion.
- `fusionahrs.algebra` provides the types `Vector`, `Quaternion`, `Matrix`
  (`matrix @ vector`) and `Euler`, and helper functions such as
  `fast_inverse_sqrt`.

Units:

- Angular rates are in degrees per second.
- Accelerations are in g.
- Headings and Euler angles are in degrees.
- `delta_time` is in seconds.

Sensor arguments can be `Vector` instances or any flat sequence of three
numbers. Any other input raises `TypeError`.

## Installing

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Using it

```python
from fusionahrs.ahrs import Ahrs
from fusionahrs.algebra import Vector
from fusionahrs.offset import Offset
from fusionahrs.states import Settings

sample_rate = 100
offset = Offset(sample_rate)
ahrs = Ahrs(Settings(gyroscope_range=2000.0, recovery_trigger_period=5 * sample_rate))

for _ in range(sample_rate):
    gyroscope = offset.update([0.0, 0.0, 0.0])
    accelerometer = Vector(0.0, 0.0, 1.0)
    magnetometer = Vector(1.0, 0.0, 0.0)
    ahrs.update(gyroscope, accelerometer, magnetometer, 1.0 / sample_rate)

print(ahrs.quaternion.to_euler())
print(ahrs.earth_acceleration)
print(ahrs.flags)
```

### Initialisation, rejection and recovery

After a reset, the gain starts at 10 and ramps down to the configured gain
over 3 seconds. This lets the orientation converge quickly.

Acceleration and magnetic rejection only work when both the gain and the
recovery trigger period are non-zero. A rejection angle of zero also disables
rejection.

A `gyroscope_range` of zero means no limit. When it is set, any reading above
98% of the range makes the algorithm reinitialise. The current orientation is
kept, and `flags.angular_rate_recovery` is set until initialisation ends.

## Example program

The `fusionahrs-example` command feeds stationary placeholder data through
the algorithm and prints one line per sample:

```
fusionahrs-example                         # simple: roll, pitch, yaw
fusionahrs-example advanced --samples 500  # adds Earth-frame X, Y, Z acceleration
```

Options:

- `--samples N` sets the number of samples. Without it, the command runs until
  interrupted.
- `--sample-period` sets the sample period in seconds for the simple mode. The
  default is 0.01.
- `--sample-rate` sets the sample rate in Hz for the advanced mode. The default
  is 100.

The same pipelines are available as generators:
`fusionahrs.examples.run_simple` and `fusionahrs.examples.run_advanced`.

## What it does not do

The package does not read sensors. It has no serial, I2C or file input, so
your code must provide the measurements. The example command only processes
built-in placeholder data.

## Running the tests

```
pytest
```