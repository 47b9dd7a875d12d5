"""Basic example: compare the three integrators on a circular binary."""

from nbody_sim import Simulator, World
from nbody_sim.physics.diagnostics import Diagnostics, relative_energy_error
from nbody_sim.physics.integrators import get_integrator, list_integrators
from nbody_sim.presets import CircularBinary

def main():
    """Integrate the same binary for ten periods with each scheme."""
    preset = CircularBinary(m1=1.0, m2=0.5, separation=1.0)
    duration = 10 * preset.period
    
    print(f"Circular binary, period = {preset.period:.4f}, duration = {duration:.4f}")
    
    for name in list_integrators():
        world = World(preset.generate())
        sim = Simulator(world, get_integrator(name), dt=0.01)
        diagnostics = Diagnostics(world)
        E0 = diagnostics.total_energy()
        
        sim.run(duration)
        
        a, b = world.bodies
        separation = (a.position - b.position).length()
        dE = relative_energy_error(E0, diagnostics.total_energy())
        print(f"{name:<18} ticks={sim.step_count:<6} separation={separation:.6f} dE/E0={dE:.3e}")
    
    print("Simulation complete!")

if __name__ == "__main__":
    main()
