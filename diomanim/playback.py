"""Playback state for previewing an animation: play, pause, seek and stepping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

_SPEED_STEP = 0.25
_MIN_SPEED = 0.25


class PlaybackKey(Enum):
    """Keys the preview responds to."""

    SPACE = "space"
    R = "r"
    ARROW_RIGHT = "right"
    ARROW_LEFT = "left"
    L = "l"
    BRACKET_RIGHT = "]"
    BRACKET_LEFT = "["
    ESCAPE = "escape"


@dataclass
class PlaybackState:
    """Time position and playback settings of a preview."""

    duration: float
    current_time: float = 0.0
    playing: bool = False
    looping: bool = True
    fps: float = 60.0
    speed: float = 1.0

    def update(self, delta_time: float) -> None:
        """Advance the time by delta_time seconds if playing."""
        if not self.playing:
            return
        self.current_time += delta_time * self.speed
        if self.current_time >= self.duration:
            if self.looping:
                self.current_time = (
                    math.fmod(self.current_time, self.duration) if self.duration > 0.0 else 0.0
                )
            else:
                self.current_time = self.duration
                self.playing = False

    def toggle_play(self) -> None:
        self.playing = not self.playing

    def seek(self, time: float) -> None:
        """Jump to a time, clamped to the animation's length."""
        self.current_time = min(max(time, 0.0), self.duration)

    def step_forward(self) -> None:
        """Move one frame ahead."""
        self.seek(self.current_time + 1.0 / self.fps)

    def step_backward(self) -> None:
        """Move one frame back."""
        self.seek(self.current_time - 1.0 / self.fps)

    def reset(self) -> None:
        """Return to the start and pause."""
        self.current_time = 0.0
        self.playing = False

    def progress(self) -> float:
        """Fraction of the animation played, from 0 to 1."""
        if self.duration > 0.0:
            return self.current_time / self.duration
        return 0.0

    def handle_key(self, key: PlaybackKey | str) -> str | None:
        """Apply a key press and return a status message, or None if nothing changed."""
        try:
            key = PlaybackKey(key)
        except ValueError:
            return None

        if key is PlaybackKey.SPACE:
            self.toggle_play()
            return "Playback: " + ("▶ Playing" if self.playing else "⏸ Paused")
        if key is PlaybackKey.R:
            self.reset()
            return "⏮ Reset to beginning"
        if key is PlaybackKey.ARROW_RIGHT:
            self.step_forward()
            return f"⏭ Step forward (time: {self.current_time:.2f}s)"
        if key is PlaybackKey.ARROW_LEFT:
            self.step_backward()
            return f"⏮ Step backward (time: {self.current_time:.2f}s)"
        if key is PlaybackKey.L:
            self.looping = not self.looping
            return "Loop: " + ("ON" if self.looping else "OFF")
        if key is PlaybackKey.BRACKET_RIGHT:
            self.speed += _SPEED_STEP
            return f"Speed: {self.speed:.2f}x"
        if key is PlaybackKey.BRACKET_LEFT:
            self.speed = max(self.speed - _SPEED_STEP, _MIN_SPEED)
            return f"Speed: {self.speed:.2f}x"
        return None