"""Demo script: run the default launch preset and show the stage timeline."""
from water_rocket_sim.main import run_simulation
from water_rocket_sim.playback import format_telemetry, sample_at
import numpy as np

result = run_simulation(verbose=True)

print("\n\n===== FLIGHT DETAILS =====")
times = result.column('time')
heights = result.column('height')
vels = result.column('velocity')
stages = result.column('active_stage')
print(f"Samples: {result.n_samples}")
print(f"Time range: {times[0]:.2f}s - {times[-1]:.2f}s")
print(f"Peak height: {np.max(heights):.1f} m at t={result.max_height_time:.2f}s")
print(f"Peak velocity: {np.max(vels):.1f} m/s")
print(f"Final height: {heights[-1]:.2f} m")
print()
print("Stage Timeline:")
prev_stage = None
for i in range(len(stages)):
    if stages[i] != prev_stage:
        print(f"  t={times[i]:6.2f}s | h={heights[i]:8.1f} m | "
              f"v={vels[i]:8.1f} m/s | Stage: {stages[i]}")
        prev_stage = stages[i]

print()
print("===== PANEL AT PEAK =====")
print(format_telemetry(sample_at(result, result.max_height_time)))
