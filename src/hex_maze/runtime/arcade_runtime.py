"""Thin arcade wrappers for a manually driven frame loop."""

from __future__ import annotations

import time
from collections import OrderedDict

import arcade


class ArcadeWindowController:
    def __init__(self, width, height, title, enabled=True, queue_input_events=True, vsync=False):
        self.width = int(width)
        self.height = int(height)
        self.queue_input_events = queue_input_events
        self._closed = False
        self._key_presses = []
        self.window = None
        if not enabled:
            return

        self.window = arcade.Window(self.width, self.height, title, vsync=vsync)
        self.window.push_handlers(
            on_key_press=self._on_key_press,
            on_close=self._on_close,
        )

    def _on_key_press(self, symbol, modifiers):
        if self.queue_input_events:
            self._key_presses.append(symbol)

    def _on_close(self):
        self._closed = True
        # Handled here; the loop closes the window itself.
        return True

    def poll_events(self):
        """Dispatch pending window events; True once the window asked to close."""

        if self.window is None:
            return True
        self.window.dispatch_events()
        return self._closed

    def consume_key_presses(self):
        presses, self._key_presses = self._key_presses, []
        return presses

    def request_close(self):
        self._closed = True

    def flip(self):
        if self.window is not None:
            self.window.flip()

    def close(self):
        if self.window is not None:
            self.window.close()
            self.window = None


class ArcadeFrameClock:
    def __init__(self):
        self._last = time.perf_counter()

    def tick(self, fps):
        """Sleep off the rest of the frame budget and return seconds since the last tick."""

        now = time.perf_counter()
        if fps > 0:
            budget = 1.0 / fps
            elapsed = now - self._last
            if elapsed < budget:
                time.sleep(budget - elapsed)
                now = time.perf_counter()
        dt = now - self._last
        self._last = now
        return dt


class TextCache:
    """Reuse ``arcade.Text`` objects keyed by their content and style."""

    def __init__(self, max_entries=256):
        self.max_entries = int(max_entries)
        self._entries = OrderedDict()

    def get_text(self, text, color, font_size, font_name, anchor_x="left", anchor_y="baseline"):
        key = (text, tuple(color), font_size, font_name, anchor_x, anchor_y)
        cached = self._entries.get(key)
        if cached is not None:
            self._entries.move_to_end(key)
            return cached

        text_obj = arcade.Text(
            text,
            0,
            0,
            color,
            font_size=font_size,
            font_name=font_name,
            anchor_x=anchor_x,
            anchor_y=anchor_y,
        )
        self._entries[key] = text_obj
        if len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)
        return text_obj
