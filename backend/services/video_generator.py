"""
Video Generation Service for funkysnake games

This service turns a recorded game (a list of Board snapshots) into an MP4:
1. Rendering each snapshot with the frame renderer (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg

The video is a rendering of a finished run, nothing is read back from it.
"""

import logging
import os
import tempfile
from typing import List, Optional, Sequence

import numpy as np
from moviepy import ImageSequenceClip

from domain.board import Board
from .frame_renderer import CELL_SIZE, FrameRenderer

logger = logging.getLogger(__name__)

# One frame per tick at the default 100 ms tick
DEFAULT_FPS = 10


class SnakeVideoGenerator:
    """Generate MP4 videos from recorded board snapshots"""

    def __init__(self, fps: int = DEFAULT_FPS, cell_size: int = CELL_SIZE):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.renderer = FrameRenderer(cell_size=cell_size)

    def render_frames(self, history: Sequence[Board]) -> List[np.ndarray]:
        """Render every snapshot to an RGB array"""
        frames = []
        total = len(history)
        for i, board in enumerate(history):
            if i % 50 == 0:
                logger.info(f"Rendering frame {i + 1}/{total}")
            frames.append(np.array(self.renderer.render_frame(board, i, total)))
        return frames

    def generate_video(
        self,
        history: Sequence[Board],
        game_id: str = "game",
        output_path: Optional[str] = None
    ) -> str:
        """
        Generate a video from a recorded game

        Args:
            history: Board snapshots in tick order
            game_id: Used to name the output file when output_path is None
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file

        Raises:
            ValueError: history is empty
        """
        if not history:
            raise ValueError("Cannot generate a video from an empty history")

        logger.info(f"Starting video generation for game {game_id} ({len(history)} frames)")
        frames = self.render_frames(history)

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"{game_id}_replay.mp4")
        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        clip = ImageSequenceClip(frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path
