import os

from matplotlib import pyplot as plt
from am_analysis.base import AnalysisResult, CHANNELS


TITLES = {
    "carrier":     "Carrier",
    "information": "Information",
    "modulated":   "Modulated",
}


def plot_analysis(result: AnalysisResult, save_path: str, show=False, f_max=200.0):
    """
    Plota: coluna esquerda = sinais no tempo, coluna direita = espectros.
    Os espectros sao limitados a [0, f_max] Hz (faixa de exibicao apenas,
    o resultado continua com todos os N/2 bins).
    """
    fig = plt.figure(figsize=(16, 10))
    gs = fig.add_gridspec(3, 2, hspace=0.45, wspace=0.25)

    view = result.frequency_slice(0.0, f_max)

    for row, name in enumerate(CHANNELS):
        samples, _ = result.channel(name)

        ax_t = fig.add_subplot(gs[row, 0])
        ax_t.plot(result.time_axis, samples)
        ax_t.set_title(f"{TITLES[name]} Signal")
        ax_t.set_xlabel("Time (s)")
        ax_t.set_ylabel("Amplitude")
        ax_t.grid(True)

        ax_f = fig.add_subplot(gs[row, 1])
        ax_f.plot(view["frequency_axis"], view[name])
        ax_f.set_title(f"{TITLES[name]} Spectrum")
        ax_f.set_xlabel("Frequency (Hz)")
        ax_f.set_ylabel("Magnitude")
        ax_f.set_xlim(0.0, f_max)
        ax_f.grid(True)

    p = result.params
    fig.suptitle(f"AM: fc={p.carrier_freq} Hz, fi={p.information_freq} Hz, m={p.modulation_index}",
                 fontsize=14, fontweight='bold')

    folder = os.path.dirname(save_path)
    if folder:
        os.makedirs(folder, exist_ok=True)

    plt.savefig(save_path, dpi=150, bbox_inches='tight')
    print(f"Figure saved to: {save_path}")

    if show:
        plt.show()
    plt.close(fig)
    return save_path
