import matplotlib.pyplot as plt
import matplotlib.widgets as widgets
import requests
import numpy as np

from simulator.utils.consts import DASHBOARD_GRID_SIZE, SERVER_PORT

# CONFIGURATION
API_URL = f"http://localhost:{SERVER_PORT}/simulate"

# Direction name → heading angle (degrees, counter-clockwise from +x)
HEADING_DEG = {"north": 90, "east": 0, "south": -90, "west": 180}


class InteractiveDashboard:

    # =========================================================================
    # INIT
    # =========================================================================

    def __init__(self):
        # --- Placement & path state ---
        self.start = {"x": 0, "y": 0, "direction": "north"}
        self.instructions = "RAALAL"
        self.raw_path = []             # Path dicts {x, y, d} returned by the server
        self.frames = []               # Interpolated animation frames

        # --- Playback state ---
        self.current_frame = 0
        self.is_playing = False

        # ---- BUILD FIGURE ----
        self.fig, self.ax = plt.subplots(figsize=(9, 10))
        plt.subplots_adjust(bottom=0.24)

        self.timer = self.fig.canvas.new_timer(interval=50)
        self.timer.add_callback(self.play_step)

        # --- Row 1: Instruction input ---
        self.txt_instructions = widgets.TextBox(
            plt.axes([0.20, 0.14, 0.45, 0.05]), 'Instructions ', initial=self.instructions
        )
        self.txt_instructions.on_submit(self.set_instructions)

        self.btn_run = widgets.Button(plt.axes([0.70, 0.14, 0.20, 0.05]), 'Run', color='lightblue')
        self.btn_run.on_clicked(self.run_simulation)

        # --- Row 2: Playback controls ---
        self.btn_prev = widgets.Button(plt.axes([0.05, 0.06, 0.12, 0.05]), '<< Prev')
        self.btn_prev.on_clicked(self.prev_step)

        self.btn_play = widgets.Button(plt.axes([0.19, 0.06, 0.12, 0.05]), 'Play', color='lightgreen')
        self.btn_play.on_clicked(self.toggle_play)

        self.btn_next = widgets.Button(plt.axes([0.33, 0.06, 0.12, 0.05]), 'Next >>')
        self.btn_next.on_clicked(self.next_step)

        self.ax_status = plt.axes([0.50, 0.06, 0.45, 0.05])
        self.ax_status.axis('off')
        self.status_text = self.ax_status.text(
            0, 0.5, "Status: ready",
            transform=self.ax_status.transAxes,
            va='center', fontsize=8.5, color='gray',
        )

        self.redraw()
        plt.show()

    # =========================================================================
    # PATH INTERPOLATION
    # =========================================================================

    def generate_frames(self, raw_path):
        """Convert the list of {x, y, d} states into dense animation frames."""
        frames = []
        for p1, p2 in zip(raw_path, raw_path[1:]):
            a1, a2 = HEADING_DEG[p1['d']], HEADING_DEG[p2['d']]
            # Quarter turns only: take the short way round
            turn = (a2 - a1 + 180) % 360 - 180
            for t in np.linspace(0, 1, 8, endpoint=False):
                frames.append({
                    'x': p1['x'] + (p2['x'] - p1['x']) * t,
                    'y': p1['y'] + (p2['y'] - p1['y']) * t,
                    'angle': a1 + turn * t,
                })
        if raw_path:
            last = raw_path[-1]
            frames.append({'x': last['x'], 'y': last['y'], 'angle': HEADING_DEG[last['d']]})
        return frames

    # =========================================================================
    # CONTROLS
    # =========================================================================

    def set_instructions(self, text):
        self.instructions = text.strip()

    def toggle_play(self, event):
        if not self.frames:
            return
        self.is_playing = not self.is_playing
        if self.is_playing:
            self.btn_play.label.set_text('Pause')
            self.timer.start()
        else:
            self.stop_playback()

    def stop_playback(self):
        self.is_playing = False
        self.btn_play.label.set_text('Play')
        self.timer.stop()

    def play_step(self):
        if self.current_frame >= len(self.frames) - 1:
            self.stop_playback()
            return
        self.current_frame += 1
        self.redraw()

    def prev_step(self, event):
        self.stop_playback()
        self.current_frame = max(0, self.current_frame - 1)
        self.redraw()

    def next_step(self, event):
        self.stop_playback()
        self.current_frame = min(max(len(self.frames) - 1, 0), self.current_frame + 1)
        self.redraw()

    def run_simulation(self, event):
        self.stop_playback()
        payload = dict(self.start, instructions=self.instructions)
        try:
            response = requests.post(API_URL, json=payload, timeout=5)
        except requests.exceptions.RequestException as e:
            self._set_status(f"Server unreachable: {e}", "red")
            return

        if response.status_code != 200:
            self._set_status(f"Rejected ({response.status_code}): {self.error_detail(response)}", "red")
            return

        data = response.json()
        self.raw_path = data["path"]
        self.frames = self.generate_frames(self.raw_path)
        self.current_frame = 0
        final = data["final"]
        self._set_status(f"{data['steps']} steps, final ({final['x']}, {final['y']}) {final['d']}", "green")
        self.redraw()

    @staticmethod
    def error_detail(response):
        """FastAPI's 'detail' field, or the raw body when it is not JSON"""
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict) and "detail" in body:
            return body["detail"]
        return body

    def _set_status(self, msg, color="gray"):
        self.status_text.set_text(f"Status: {msg}")
        self.status_text.set_color(color)
        self.fig.canvas.draw_idle()

    # =========================================================================
    # DRAWING
    # =========================================================================

    def _view_limits(self):
        xs = [p['x'] for p in self.raw_path] or [0]
        ys = [p['y'] for p in self.raw_path] or [0]
        half = max(DASHBOARD_GRID_SIZE, max(map(abs, xs + ys)) + 2)
        return -half, half

    def redraw(self):
        self.ax.clear()
        lo, hi = self._view_limits()
        self.ax.set_xlim(lo, hi)
        self.ax.set_ylim(lo, hi)
        self.ax.set_xticks(np.arange(lo, hi + 1, 1), minor=True)
        self.ax.set_yticks(np.arange(lo, hi + 1, 1), minor=True)
        self.ax.grid(which='minor', color='lightgray', lw=0.5)
        self.ax.axhline(0, color='gray', lw=0.8)
        self.ax.axvline(0, color='gray', lw=0.8)
        self.ax.set_aspect('equal')
        self.ax.set_title(f"Toy robot: {self.instructions or '(no instructions)'}")

        if self.raw_path:
            xs = np.array([p['x'] for p in self.raw_path])
            ys = np.array([p['y'] for p in self.raw_path])
            self.ax.plot(xs, ys, color='steelblue', lw=2, alpha=0.6, zorder=2)
            self.ax.scatter(xs[:1], ys[:1], color='green', s=60, zorder=3, label='start')
            self.ax.scatter(xs[-1:], ys[-1:], color='red', s=60, zorder=3, label='end')
            self.ax.legend(loc='upper right')

        if self.frames:
            f = self.frames[self.current_frame]
            adx = 0.8 * np.cos(np.radians(f['angle']))
            ady = 0.8 * np.sin(np.radians(f['angle']))
            self.ax.arrow(f['x'], f['y'], adx, ady, color='blue', width=0.1, head_width=0.35, zorder=5)

        self.fig.canvas.draw()


if __name__ == "__main__":
    dashboard = InteractiveDashboard()
