# hideseek

The client side of a multiplayer hide-and-seek game. It needs only the standard library.

## Modules

### `hideseek.client`

This module holds a blocking TCP client for the game server. Each request is sent as one line of JSON. The server answers each request with exactly one line of JSON. A request can be any value that `json.dumps` accepts. A response is returned as the decoded JSON value.

- `MultiplayerClient.connect(address)` opens the connection. `address` is either a `(host, port)` pair or a `"host:port"` string. Reads and writes on the socket time out after 2 seconds.
- `run()` hands the socket over to a worker thread and returns a `ClientHandle`. Calling `run()` a second time raises `ClientError`.

A `ClientHandle` has these methods:

- `make_request_with_timeout(request, timeout)` sends a request and waits for its response. `timeout` is in seconds. `None` means wait until the response arrives.
- `make_request(request)` does the same with a fixed timeout of 0.1 seconds.
- `ping(request, count, interval, timeout)` sends `request` `count` times and sleeps `interval` seconds after each one. It returns a `PingSessionResult` with these fields:
  - `session_duration`
  - `results`: the round-trip time of each request in seconds, or `None` where the request failed
  - `loss_rate`: the percentage of failed requests
  - `average_duration`: the mean of the successful round trips, or `None` if every request failed

  A `count` that is not positive raises `ValueError`.
- `wait_until_finished()` joins the worker thread.
- `shutdown()` stops the worker thread and closes the socket.

A handle is also a context manager. Leaving the `with` block calls `shutdown()`.

Errors are reported as follows:

- `ClientError` is raised when connecting fails or the address is invalid.
- `RequestError` is raised when a request cannot be completed. This covers socket errors, an undecodable response, and a stopped worker. It has two subclasses:
  - `ServerClosedError`: the server closed the connection.
  - `RequestTimeoutError`: no response arrived in time.

The module also defines the game constants `SEEKING_MAX_TIME` (5000) and `SEEKING_MAX_TRIES` (3).

### `hideseek.components`

This module holds the geometry and the GUI widgets, all in screen pixels.

- `Vector2` is a 2D vector with `+`, `-`, scalar `*` and `Vector2.zero()`.
- `Rect` has `contains(point)`, which counts the edges as inside, and `inset(border)`.
- `GuiBox` is a filled, coloured rectangle.
- `EntityView` is a rectangle with a colour, an optional marker colour, and a `highlighted` flag.
- `AppGuiTransition` lists the screens the client may switch to.
- There are four widgets:
  - `GuiPlainButton` has `drawable_boxes()` and `is_inside()`.
  - `GuiToggleButton` has `drawable_boxes()`, `toggle()` and `is_inside()`.
  - `GuiIndicator` has `drawable_box()` and `toggle()`.
  - `GuiProgressBar` has `set_percentage()`, which clamps the value to 0..100, and `drawable_boxes()`.

  The frame border of each widget is 8 pixels.
- The templates `build_plain_button`, `build_toggle_button`, `build_indicator` and `build_progress_bar` create each widget with its standard colours. Each template takes one of the three sizes in `GuiComponentSize`.

### `hideseek.render`

This module turns GUI boxes and entity views into `Quad`s in normalized device coordinates. A quad holds four vertices, six indices and an RGBA colour with components between 0 and 1.

- `RenderBatch` collects the GUI elements and the entity views. It has these methods:
  - `append_gui_element` and `append_entity_view` add items.
  - `set_camera(camera, world_scale)` sets the view. The default world scale is 0.05.
  - `clear()` removes the items and keeps the camera.
  - `entity_quads(aspect_ratio)` and `gui_quads(width, height)` produce the quads.
- `mix_rgb(c1, c2, mix_factor)` blends two colours. `mix_factor` is the weight of `c1`.
- `entity_color(view)` gives the colour of an entity. If the entity has a marker colour, that colour is mixed in 50/50. If the entity is highlighted, yellow is then mixed in 50/50.
- `rect_quad_vertices(x, y, w, h)` returns the corners and indices of a rectangle.

## Example

```python
from hideseek.components import Vector2, GuiComponentSize, build_toggle_button
from hideseek.render import RenderBatch

toggle = build_toggle_button(Vector2(100.0, 50.0), GuiComponentSize.BIG)
toggle.toggle()
print(toggle.is_inside(Vector2(150.0, 80.0)))  # True

batch = RenderBatch()
for box in toggle.drawable_boxes():
    batch.append_gui_element(box)
quads = batch.gui_quads(800.0, 600.0)
```

## What this package does not do

- It contains no game server.
- It does not define the request and response messages. Callers build and read them as plain JSON values.
- It opens no window and does no GPU drawing. `hideseek.render` stops at quads, and a drawing backend has to consume them.
- It has no screen logic for the lobby, in-game or ending screens, and it provides no command to run.

## Tests

```
pip install -e ".[test]"
pytest
```