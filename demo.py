"""
Interactive patrol demo.

A guard walks a character map: straight ahead until blocked by '#', then a
quarter turn to the right. Step through the walk with the keyboard and watch
the visited cells fill in.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from direction import Direction
from grid import CharGrid
from grid_render import RenderOptions, cell_colors, render_grid
from pos import DirectionalPos, Pos
from puzzle_input import get_text

logger = logging.getLogger(__name__)

GUARD_SYMBOLS = "^>v<"


def _heading(symbol: str) -> Direction:
    """
    Direction for a guard symbol as seen on screen.

    Row 0 is drawn at the top, so moving up the screen is -y (Direction.DOWN).
    """
    direction = Direction.from_byte(symbol)
    if direction in (Direction.UP, Direction.DOWN):
        return direction.back()
    return direction


@dataclass
class Patrol:
    """The map and the guard's starting state."""

    grid: CharGrid
    start: DirectionalPos[int]
    obstacle: int = ord("#")

    @classmethod
    def from_grid(cls, grid: CharGrid) -> Patrol:
        """
        Locate the guard symbol in a map.

        Raises:
            ValueError: If the map has no guard symbol
        """
        for symbol in GUARD_SYMBOLS:
            pos = grid.find(symbol)
            if pos is not None:
                return cls(grid, DirectionalPos(pos, _heading(symbol)))
        raise ValueError(
            f"No guard found in map\n"
            f"  Expected one of: {', '.join(GUARD_SYMBOLS)}"
        )

    def next_state(
        self, guard: DirectionalPos[int], block: Pos[int] | None = None
    ) -> DirectionalPos[int] | None:
        """The guard's next state, or None once it steps off the map."""
        ahead = guard.checked_advance(1)
        if ahead is None or not self.grid.has(ahead.pos):
            return None
        if ahead.pos == block or self.grid[ahead.pos] == self.obstacle:
            # A right turn on screen is a left turn with y growing downward
            return guard.turn_left()
        return ahead

    def walk(self, block: Pos[int] | None = None) -> tuple[set[Pos[int]], bool]:
        """
        Walk until the guard leaves the map or repeats a state.

        Returns:
            (visited positions, whether the walk ended in a loop)
        """
        guard: DirectionalPos[int] | None = self.start
        seen = {self.start}
        visited = {self.start.pos}
        while True:
            guard = self.next_state(guard, block)
            if guard is None:
                return visited, False
            if guard in seen:
                return visited, True
            seen.add(guard)
            visited.add(guard.pos)

    def count_loop_obstructions(self) -> int:
        """Count cells where one extra obstacle would trap the guard in a loop."""
        path, _ = self.walk()
        candidates = path - {self.start.pos}
        count = sum(1 for block in candidates if self.walk(block)[1])
        logger.info("count_loop_obstructions: %d of %d candidates loop", count, len(candidates))
        return count


class PatrolDemo:
    """Interactive step-through of a patrol."""

    def __init__(self, patrol: Patrol) -> None:
        self.patrol = patrol
        self.console = Console()
        self.colors = cell_colors(["#"])
        self.reset()

    def reset(self) -> None:
        """Put the guard back at its starting state."""
        self.guard: DirectionalPos[int] | None = self.patrol.start
        self.last = self.patrol.start
        self.visited = {self.patrol.start.pos}
        self.seen = {self.patrol.start}
        self.status_message = "Ready"

    def step(self) -> None:
        """Advance the guard by one move or turn."""
        if self.guard is None:
            self.status_message = "The guard has already left the map"
            return

        self.guard = self.patrol.next_state(self.guard)
        if self.guard is None:
            self.status_message = f"✓ Guard left the map after visiting {len(self.visited)} cells"
            return

        self.last = self.guard
        if self.guard in self.seen:
            self.status_message = f"✗ Loop detected at {self.guard}"
            self.guard = None
            return

        self.seen.add(self.guard)
        self.visited.add(self.guard.pos)
        self.status_message = f"Guard at {self.guard}"

    def finish(self) -> None:
        while self.guard is not None:
            self.step()

    def generate_display(self) -> Panel:
        """Generate the current display with map and status."""
        grid_text = render_grid(
            self.patrol.grid,
            highlights=self.visited,
            colors=self.colors,
            options=RenderOptions(title="patrol"),
        )

        status = Text()
        status.append("Guard: ", style="bold")
        status.append(f"{self.last}\n")
        status.append("Visited: ", style="bold")
        status.append(f"{len(self.visited)} cells\n\n")
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  Space - Step\n")
        status.append("  F - Finish the walk\n")
        status.append("  R - Reset\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Patrol Demo", border_style="green", width=80)

    def run(self) -> None:
        """Run the demo until the user quits."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == "q":
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == "r":
                        self.reset()
                    elif key.lower() == "f":
                        self.finish()
                    elif key in (" ", "n"):
                        self.step()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    lab="\n".join(
        [
            "....#.....",
            ".........#",
            "..........",
            "..#.......",
            ".......#..",
            "..........",
            ".#..^.....",
            "........#.",
            "#.........",
            "......#...",
        ]
    ),
    corridor="\n".join(
        [
            "#######",
            "#.....#",
            "#.>...#",
            "#.....#",
            "###.###",
        ]
    ),
)


def load_map(arg: str) -> CharGrid:
    """A built-in layout by name, or a map read from a file path."""
    if arg in LAYOUTS:
        return CharGrid.from_str(LAYOUTS[arg])
    if os.path.exists(arg):
        return CharGrid.from_str(get_text(arg))
    raise ValueError(
        f"Unknown layout '{arg}'\n"
        f"  Available layouts: {', '.join(sorted(LAYOUTS))}\n"
        f"  Or pass the path of a map file"
    )


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "sublime":
        # Running from IDE - walk to the end and print the result
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

        patrol = Patrol.from_grid(load_map(sys.argv[2] if len(sys.argv) > 2 else "lab"))
        visited, looped = patrol.walk()
        print(render_grid(patrol.grid, highlights=visited, options=RenderOptions(title="patrol")))
        print(f"Visited {len(visited)} cells{' (loop)' if looped else ''}")
        print(f"Loop obstructions: {patrol.count_loop_obstructions()}")
    else:
        patrol = Patrol.from_grid(load_map(sys.argv[1] if len(sys.argv) > 1 else "lab"))
        PatrolDemo(patrol).run()
