# Step-by-step visualisation of the Jarvis march in jarvis_march.py

import logging

import matplotlib.pyplot as plt
import matplotlib.animation as animation

from .jarvis_march import Point, orientation, leftmost_index, CLOCKWISE


def _frame(points, hull, pivot=None, candidate=None, checking=None,
           status="", final_hull_path=None):
    return {
        'all_points': points,
        'hull_points': list(hull),
        'current_pivot': pivot,
        'candidate_next': candidate,
        'checking_point': checking,
        'status': status,
        'final_hull_path': final_hull_path,
    }


def jarvis_march_trace(points_list):
    """
    Runs the Jarvis march and yields states for animation.
    points_list: A list of (x,y) tuples.

    Uses the same selection rule as jarvis_march.gift_wrapping, so the last
    frame's 'hull_points' is the hull that function returns.
    """
    points = [Point(*p) for p in points_list]  # No deduplication
    n = len(points)

    if n < 3:
        yield _frame(points, [],
                     status=f"No hull for n={n}<3." if points else "No points.",
                     final_hull_path=[])
        return

    start_index = leftmost_index(points)
    hull = []
    visited = set()
    current_pivot_idx = start_index

    while True:
        pivot = points[current_pivot_idx]
        hull.append(pivot)
        visited.add(current_pivot_idx)
        yield _frame(points, hull, pivot=pivot,
                     status=f"Point {tuple(pivot)} added to hull. Searching next...")

        candidate_next_idx = (current_pivot_idx + 1) % n
        yield _frame(points, hull, pivot=pivot,
                     candidate=points[candidate_next_idx],
                     status=f"Initial candidate for next: {tuple(points[candidate_next_idx])}")

        for i in range(n):
            if i == current_pivot_idx:  # Pivot never turns clockwise against itself
                continue

            checking_point = points[i]
            o = orientation(pivot, checking_point, points[candidate_next_idx])

            if o == CLOCKWISE:
                old = points[candidate_next_idx]
                candidate_next_idx = i
                yield _frame(points, hull, pivot=pivot,
                             candidate=checking_point, checking=checking_point,
                             status=f"New best candidate: {tuple(checking_point)} (was {tuple(old)})")
            else:
                yield _frame(points, hull, pivot=pivot,
                             candidate=points[candidate_next_idx], checking=checking_point,
                             status=f"{tuple(checking_point)} does not replace candidate "
                                    f"{tuple(points[candidate_next_idx])}. "
                                    f"Turn was {'collinear' if o == 0 else 'CCW'}")

        current_pivot_idx = candidate_next_idx
        if current_pivot_idx == start_index:  # Wrapped around to the start
            break
        if current_pivot_idx in visited:  # Cycle that misses the start
            logging.debug("jarvis_march_trace: revisited index %d, stopping", current_pivot_idx)
            break

    logging.debug("jarvis_march_trace: hull complete with %d points", len(hull))
    yield _frame(points, hull, pivot=points[current_pivot_idx],
                 status=f"Hull complete! Found {len(hull)} points.",
                 final_hull_path=list(hull) + [hull[0]])  # Close the polygon for drawing


class HullAnimator:
    """Figure and artists for one trace."""

    def __init__(self, all_points):
        self.all_points = list(all_points)
        self.fig, self.ax = plt.subplots(figsize=(8, 8))
        ax = self.ax

        self.scatter_all_points = ax.scatter([], [], c='blue', s=50, label="All Points")
        self.hull_line_plot, = ax.plot([], [], 'r-', lw=2, label="Convex Hull")
        self.candidate_line_plot, = ax.plot([], [], 'g--', lw=1.5, label="Pivot-to-Candidate")
        self.checking_line_plot, = ax.plot([], [], 'k:', lw=1, label="Pivot-to-Checking")
        self.pivot_marker, = ax.plot([], [], 'o', ms=12, mec='orange', mfc='None', mew=2,
                                     label="Current Pivot")
        self.candidate_marker, = ax.plot([], [], '*', ms=12, mec='green', mfc='None', mew=2,
                                         label="Candidate Next")
        self.checking_marker, = ax.plot([], [], 'x', ms=10, color='gray', mew=2,
                                        label="Checking Point")
        self.status_text = ax.text(0.02, 0.98, "", transform=ax.transAxes, ha="left", va="top",
                                   fontsize=9,
                                   bbox=dict(boxstyle="round,pad=0.3", fc="wheat", alpha=0.7))

    @property
    def artists(self):
        return (self.scatter_all_points, self.hull_line_plot, self.candidate_line_plot,
                self.checking_line_plot, self.pivot_marker, self.candidate_marker,
                self.checking_marker, self.status_text)

    def init(self):
        pts = self.all_points
        if pts:
            self.ax.set_xlim(min(p[0] for p in pts) - 1, max(p[0] for p in pts) + 1)
            self.ax.set_ylim(min(p[1] for p in pts) - 1, max(p[1] for p in pts) + 1)
            self.scatter_all_points.set_offsets([(p[0], p[1]) for p in pts])
        self.ax.set_aspect('equal', adjustable='box')
        self.ax.legend(fontsize='small', loc='lower right')
        self.ax.set_title("Jarvis March (Gift Wrapping) Visualization")

        for line in self.artists[1:-1]:
            line.set_data([], [])
        self.status_text.set_text("Initializing...")
        return self.artists

    def update(self, frame_data):
        hull_pts = frame_data['hull_points']
        pivot = frame_data['current_pivot']
        candidate = frame_data['candidate_next']
        checking = frame_data['checking_point']
        final_hull_path = frame_data['final_hull_path']

        if final_hull_path:  # Final hull is drawn closed
            path = final_hull_path
            self.hull_line_plot.set_color('purple')
            self.hull_line_plot.set_linewidth(3)
        else:
            path = hull_pts
            self.hull_line_plot.set_color('red')
            self.hull_line_plot.set_linewidth(2)
        self.hull_line_plot.set_data([p[0] for p in path], [p[1] for p in path])

        _mark(self.pivot_marker, pivot)
        _mark(self.candidate_marker, candidate if pivot else None)
        _mark(self.checking_marker, checking if pivot else None)
        _segment(self.candidate_line_plot, pivot, candidate)
        _segment(self.checking_line_plot, pivot, checking)

        self.status_text.set_text(frame_data['status'])
        return self.artists


def _mark(marker, point):
    if point is None:
        marker.set_data([], [])
    else:
        marker.set_data([point[0]], [point[1]])


def _segment(line, a, b):
    if a is None or b is None:
        line.set_data([], [])
    else:
        line.set_data([a[0], b[0]], [a[1], b[1]])


def build_animation(points, interval=700):
    """Returns (figure, FuncAnimation) replaying the march over `points`."""
    trace_steps = list(jarvis_march_trace(points))
    logging.debug("build_animation: %d frames", len(trace_steps))

    animator = HullAnimator(trace_steps[0]['all_points'])
    ani = animation.FuncAnimation(animator.fig,
                                  animator.update,
                                  frames=trace_steps,
                                  init_func=animator.init,
                                  blit=True,
                                  interval=interval,  # Milliseconds between frames
                                  repeat=False)
    animator.fig.tight_layout()
    return animator.fig, ani


if __name__ == '__main__':
    S = [(2, 2), (4, 1), (3, 4), (5, 3), (1, 5), (6, 5), (4, 6), (2, 7), (5, 0)]
    # S = [(0,0),(1,1),(2,2),(3,3)] # Test all collinear

    fig, ani = build_animation(S)
    plt.show()
