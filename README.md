# iptscore

Building blocks for processing input from capacitive touchscreens: the
contact model, frame-to-frame contact tracking, heatmap helpers, and a
touch device that turns frames of contacts into Linux-style multitouch and
singletouch input events.

## Installation

```
pip install iptscore
```

To run the test suite:

```
pip install "iptscore[test]"
pytest
```

## What is inside

- `iptscore.contact`: the `Contact` dataclass (`mean`, `size`,
  `orientation`, `normalized`, and the optional `index`, `valid` and
  `stable`) and `find_in_frame(index, frame)`, which returns the first
  contact with that index or `None`.
- `iptscore.tracking`: `calculate_distances(x, y)`, a matrix with one row
  per contact of `y` and one column per contact of `x`, and `Tracker`.
  `Tracker.track(frame)` assigns indices in place: contacts nearest to a
  contact of the previous frame inherit its index, the rest get an index the
  previous frame did not use. `Tracker.reset()` forgets the previous frame.
- `iptscore.ellipse`: `size(eigenvalues)` gives the diameters of both axes
  (`2 * sqrt(|eigenvalue|)`), and `angle(eigenvectors)` the orientation of
  the first eigenvector folded into `[0, pi)`.
- `iptscore.kernels`: `gaussian(rows, cols, sigma)`, a normalized gaussian
  kernel; both dimensions must be odd, otherwise `ValueError` is raised.
- `iptscore.neutral`: the neutral (no-contact) level of a heatmap.
  `calculate(heatmap, algorithm, offset)` uses `Algorithm.MODE`
  (`statistical_mode`), `Algorithm.AVERAGE` or `Algorithm.CONSTANT`, and
  adds `offset`.
- `iptscore.overlaps`: `Box`, an axis-aligned box with inclusive integer
  corners (`is_empty`, `intersection`, `merged`); `area`, `overlap`
  (intersection over union), `search` for pairs overlapping by at least
  half, and `merge(clusters, iterations)`, which merges such pairs
  repeatedly and returns the new list. `iterations` of 0 raises
  `ValueError`.
- `iptscore.touch`: `TouchDevice(config, vendor, product, sink=None)`,
  which takes frames of normalized contacts and emits events as
  `(type, code, value)` into a sink. `RecordingSink` keeps the device
  description (`name`, `vendor`, `product`, `absinfo`, a list of `AbsInfo`)
  and every event in `events`. `TouchConfig` holds the screen `width` and
  `height`, `touch_overshoot` and `touch_disable_on_palm`. The device
  lifts contacts that are invalid or too far off the screen, ignores
  unstable ones, lifts everything when palm rejection is on and an invalid
  contact is present, and can be switched with `enable()` / `disable()`;
  `enabled()` and `active()` report its state.

## Example

```python
from iptscore.contact import Contact
from iptscore.tracking import Tracker

tracker = Tracker()

first = [Contact(mean=(0.2, 0.3)), Contact(mean=(0.7, 0.7))]
tracker.track(first)

second = [Contact(mean=(0.71, 0.69)), Contact(mean=(0.21, 0.31))]
tracker.track(second)

# Each contact in the second frame carries the index of its nearest
# counterpart from the first frame.
print([c.index for c in second])  # [1, 0]
```

Feeding contacts to a touch device:

```python
from iptscore.touch import RecordingSink, TouchConfig, TouchDevice

sink = RecordingSink()
device = TouchDevice(TouchConfig(width=26.0, height=17.3), 0x1234, 0x5678, sink=sink)
device.update(second)
print(sink.events)
```

## What it does not do

There is no command and no running service. The package does not read from
a touchscreen, does not detect contacts in a heatmap by itself, and does
not create a kernel input device: `TouchDevice` only hands events to the
sink it is given, and writing them to the system is up to that sink.