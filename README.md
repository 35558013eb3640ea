# camwatch

camwatch is a plain Python library for the bookkeeping behind a
multi-camera object-tracking station. It covers:

- **Camera sources** (`camwatch.camera_source`, `camwatch.camera_manager`).
  A `CameraSource` is a webcam, a video file, an RTSP stream or an IP camera
  (`CameraType`). You can open, read, reconnect and close it.
  `CameraManager` keeps the list of cameras and saves it to JSON or loads it
  back.
- **Class filtering** (`camwatch.class_filter`, `camwatch.class_selection`).
  `ClassFilter` decides which detector class ids are counted. If no class is
  selected, every class is counted. `ClassSelection` holds the checked state
  behind a class picker: search filter, select or deselect the visible
  classes, status text, and apply.
- **Detection events** (`camwatch.detection_event`, `camwatch.event_manager`).
  A `DetectionEvent` is an entry, periodic or exit event (`EventType`) for a
  tracked object in a named region. `EventManager` collects events, writes
  their cropped images and reads `metadata.json` files back.
- **Display state.** This part covers:
  - `camwatch.camera_grid.CameraGrid`, a fixed grid filled in row order.
  - `camwatch.crops_panel.CropsPanel`, a bounded list of recent crops with
    newest first.
  - `camwatch.display_settings.SettingsStore`, which keeps display settings
    in an INI file.
  - `camwatch.add_camera.CameraForm`, which validates a new camera.
  - `camwatch.events_viewer`, which filters events, pages them with
    `EventPager` and builds thumbnail text.
  - `camwatch.region_count_view`, which builds the rows of the region-count
    table.

## Managing cameras

```python
from camwatch.camera_manager import CameraManager
from camwatch.camera_source import CameraType

manager = CameraManager()
front = manager.add_camera("Front Door", CameraType.WEBCAM, "0")
manager.add_camera("Lobby", CameraType.VIDEO_FILE, "recordings/lobby.mp4")
manager.save("cameras.json")

restored = CameraManager()
restored.load("cameras.json")
print([camera.name for camera in restored.cameras()])
```

Camera ids are handed out in sequence, starting at 1. The next id is saved
with the cameras, so ids stay unique after a reload.

Each method reports failure by raising an error:

- `remove_camera`, `update_camera` and `open_camera` raise `KeyError` for an
  unknown id.
- `CameraSource.open` raises `CameraError` when the stream cannot be opened.
- `CameraSource.read` raises `CameraError` if the camera is not open. When no
  frame could be read it returns `None`.

By default, streams are read through imageio (`ImageioCapture`). For a
webcam this is the `<videoN>` device. Reading video only works if imageio
has a video backend installed. To supply your own reader, pass an `opener`
callable to `CameraManager` or `CameraSource`. It receives a device index or
a source string and must return an object with `read()`, `release()` and
`is_opened()`.

## Counting only some classes

```python
from camwatch.class_filter import ClassFilter, default_class_filter

class_filter = ClassFilter()
class_filter.should_count(7)      # True: nothing selected, so every class counts
class_filter.select({0, 2})
class_filter.should_count(7)      # False
class_filter.clear()              # back to counting every class

shared = default_class_filter()   # one filter shared across the application
```

## Recording events

```python
from camwatch.detection_event import DetectionEvent, EventType
from camwatch.event_manager import EventManager

events = EventManager("events", 30)
# image is an H x W x 3 numpy array
path = events.save_event_image(image, "Front Door", "Gate", 12, EventType.FIRST_ENTRY)
events.add_event(DetectionEvent(track_id=12, camera_name="Front Door",
                                region_name="Gate", image_path=path))
```

Images are written to the following path:

```
events/<camera>/<region>/<YYYY-MM-DD>/<track>_<HHMMSS>_<TYPE>.jpg
```

Spaces in camera and region names become underscores.

Events are kept in memory until you write them.
`save_metadata(directory)` writes the events whose image path lies in that
directory to `directory/metadata.json`.

`load_from_directory()` reads every `metadata.json` found under the base
directory and returns the number of events it loaded. Unreadable files are
skipped. If the base directory does not exist, it raises
`FileNotFoundError`.

## What the package does not do

camwatch has no graphical interface and no command-line program. It does
not run an object detector or a tracker, and it draws nothing on frames.

It does not send notifications itself. `CropsPanel` hands crops and
captions to a `notifier` callable that you supply.

Region counts are not gathered here. `region_count_view.build_rows` takes a
mapping of region name to `(count, ids)` that you provide.

## Running the tests

The tests use pytest. Install the `test` extra, then run `pytest`.