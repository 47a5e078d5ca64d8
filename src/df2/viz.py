from __future__ import annotations
from .models.shot import Shot

def plot_shot(shot: Shot, *, show: bool = True):
    """Outgoing pulse and echo waveforms of one shot, for sanity-checking."""
    import matplotlib.pyplot as plt
    fig, (ax_out, ax_echo) = plt.subplots(2, 1)
    ax_out.plot(shot.outgoing, lw=1)
    ax_out.set_title(f"Shot {shot.number}: outgoing pulse")
    ax_out.set_ylabel("Amplitude")
    for i, seg in enumerate(shot.segments):
        ax_echo.plot(seg.data, lw=1, label=f"echo {i} (dt={seg.time_interval})")
    ax_echo.set_title(f"{len(shot.segments)} echo segments")
    ax_echo.set_xlabel("Sample")
    ax_echo.set_ylabel("Amplitude")
    if shot.segments:
        ax_echo.legend(fontsize="small")
    fig.tight_layout()
    if show:
        plt.show()
    return fig
