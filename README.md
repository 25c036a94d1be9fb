# spacenerds

Building blocks for a cooperative starship bridge simulator: 3D vector and
quaternion math, shield profiles, an object-slot allocator, a big-endian
packet marshaller, stroke fonts, event callbacks, faction and ship-type data
files, and the interaction logic of buttons and sliders.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `spacenerds.vec3`: the immutable `Vec3` type (`+`, `-`, `*` by a scalar,
  unary `-`, `dot`, `cross`, `len2`, `magnitude`, `normalized`, `dist`,
  `lerp`), and the functions `normalize_euler_0_2pi`, `heading_mark_to_vec3`,
  `vec3_to_heading_mark` (returns `(r, heading, mark)`),
  `sphere_line_segment_intersection` (returns the two endpoints of the part of
  a segment inside a sphere, or `None`) and `plane_vector_u_and_v_from_normal`.
- `spacenerds.quaternion`: the immutable `Quat` and `Euler` types.
  `Quat` has `from_axis_angle`, `from_measurements`, `to_axis_angle`, `dot`,
  `rotate_vec`, `length`, `conjugate`, `*`, `+`, `scale`, `normalized`,
  `to_euler`, `to_heading_mark`, `to_rh_rot_matrix` and `to_lh_rot_matrix`
  (16 floats each), `lerp`, `nlerp`, `slerp`,
  `apply_relative_yaw_pitch_roll`, `apply_relative_yaw_pitch`,
  `decompose_twist_swing` and `decompose_swing_twist`. The module also has
  `IDENTITY`, `quat_from_u2v(u, v, up=None)` and `vec3_rot_axis`.
- `spacenerds.shield`: `shield_strength(probe, strength, width, depth, wavelength)`
  takes byte values (0..255, `ValueError` otherwise) and returns a strength
  between 0 and 1.
- `spacenerds.damcon`: `damcon_system_name`, `damcon_part_name`,
  `damcon_tool_name` and `damcon_damage_name`; out-of-range indexes give
  `"UNKNOWN"`.
- `spacenerds.pool`: `ObjectPool(maxobjs)` hands out the lowest free id with
  `alloc()` (raising `PoolFullError` when full), and has `use`, `free`,
  `free_all`, `highest` (-1 when empty) and `is_allocated`.
- `spacenerds.marshal`: `PackedBuffer(size)` with `append_*`/`extract_*`
  methods for u8, u16, u32, u64, doubles, length-prefixed strings, raw bytes,
  quaternions and scaled 32-bit values, plus `append(fmt, *args)` and
  `extract(fmt, *args)` driven by format strings (`b`, `h`, `w`, `q`, `s`,
  `r`, `d`, `S`, `U`, `Q`, `R`). `PackedBufferQueue` is a thread-safe queue
  with `add`, `combine` and `length`. Module functions: `packed_buffer_new`,
  `unpack`, `calculate_buffer_size` (fixed-size codes only), `dtou32`,
  `u32tod`, `dtos32`, `s32tod`, `qtos32`, `s32toq`. Overflow, a full buffer or
  a bad format raises `MarshalError`.
- `spacenerds.font`: `make_font(xscale, yscale)` returns a dict from
  character to `Glyph` (points, `None` where the pen lifts, and a bounding
  box); `font_lineheight(yscale)`.
- `spacenerds.legacy_font`: `make_font(xscale, yscale)` for the older,
  narrower stroke font.
- `spacenerds.events`: `EventCallbacks` (`register`, `callback_list`,
  `schedule`, `clear`; at most three callbacks per event) and
  `CallbackSchedule` of `ScheduledCallback` entries, newest first.
- `spacenerds.factions`: `read_factions(path)` returns a `FactionTable` with
  `name`, `center`, `nearest` and `hostility`; a bad file raises
  `FactionError`.
- `spacenerds.ship_types`: `read_ship_types(path)` returns a list of
  `ShipType`; `ShipClass` enumerates the ship classes.
- `spacenerds.widgets`: `Button` (`set_label`, `make_checkbox`, `press`,
  `tick`), `Slider` (`sample`, `bar_color`, `press`, `poke_input`,
  `set_fuzz`) and the `Color` enumeration.

## Example

```python
from spacenerds.quaternion import Quat
from spacenerds.vec3 import Vec3
from spacenerds.marshal import packed_buffer_new, unpack

q = Quat.from_axis_angle(0.0, 1.0, 0.0, 1.5707963)
print(q.rotate_vec(Vec3(1.0, 0.0, 0.0)))

pb = packed_buffer_new("bhw", 1, 2, 3)
print(unpack(pb.buffer, "bhw"))  # (1, 2, 3)
```

## What it does not do

This is a library only. It has no game server or client, no networking,
no commands to run, no sound, and no drawing: fonts, buttons and sliders hold
geometry and state, and rendering them is left to the caller.