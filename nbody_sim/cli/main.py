"""CLI main entry point."""

import argparse
import logging
import sys
from nbody_sim.io.csv_reader import InitialConditionsError, read_bodies
from nbody_sim.io.report import print_report
from nbody_sim.io.state_io import save_world
from nbody_sim.physics.diagnostics import Diagnostics, relative_energy_error
from nbody_sim.physics.integrators import get_integrator, list_integrators
from nbody_sim.physics.simulator import Simulator, TrajectoryRecorder
from nbody_sim.physics.world import World
from nbody_sim.presets import get_preset, list_presets
from nbody_sim.utils.config import Config, load_config

logger = logging.getLogger(__name__)

# Options that may come from a config file; CLI values win when given
_OVERRIDABLE = ('file', 'preset', 'tick', 'sim', 'dur', 'rest_frame', 'save_state', 'plot', 'record_every')


def fail(message: str):
    """Print an error and terminate with status 1."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def resolve_config(args) -> Config:
    """Merge the optional config file with command line overrides."""
    config = load_config(args.config) if args.config else Config()
    # An input source given on the command line replaces the config's
    if args.file is not None:
        config.preset = None
    if args.preset is not None:
        config.file = None
    for key in _OVERRIDABLE:
        value = getattr(args, key, None)
        if value is not None:
            setattr(config, key, value)
    return config


def load_bodies(config: Config):
    """Initial bodies from the CSV file or the named preset."""
    if config.file and config.preset:
        raise ValueError("Give either a file or a preset, not both")
    if config.file:
        return read_bodies(config.file)
    if config.preset:
        return get_preset(config.preset, **config.preset_params).generate()
    raise ValueError("No initial conditions: use --file or --preset")


def run_simulation(config: Config, show_energy: bool = False) -> Simulator:
    """Run a simulation and print the report."""
    if config.dur is None:
        raise ValueError("Simulation duration is required (--dur)")
    
    integrator = get_integrator(config.sim)
    world = World(load_bodies(config))
    sim = Simulator(world, integrator, dt=config.tick)
    
    recorder = None
    if config.plot:
        recorder = TrajectoryRecorder(every=config.record_every)
        recorder.record(sim)
        sim.on_step_callback = recorder
    
    diagnostics = Diagnostics(world)
    if show_energy:
        _, _, E0 = diagnostics.compute_energies()
    
    logger.info("Running %s with %d bodies, dt=%g, duration=%g", integrator.name, len(world), sim.dt, config.dur)
    sim.run(config.dur)
    
    if show_energy:
        # Measured before the frame change, which alters kinetic energy
        K, U, E = diagnostics.compute_energies()
    
    if config.rest_frame is not None:
        sim.into_rest_frame(config.rest_frame)
    
    print_report(world)
    
    if show_energy:
        print(f"Energy: K = {K:e}, U = {U:e}, E = {E:e}, E0 = {E0:e}, dE/E0 = {relative_energy_error(E0, E):e}")
    
    if config.save_state:
        save_world(world, config.save_state, metadata={
            'steps': sim.step_count,
            'integrator': integrator.name,
            'dt': sim.dt,
        })
        print(f"State saved to {config.save_state}")
    
    if recorder is not None:
        from nbody_sim.render.trajectory_plot import plot_trajectories
        plot_trajectories(recorder.times, recorder.positions, output_path=config.plot)
        print(f"Trajectory plot saved to {config.plot}")
    
    return sim


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="N-body simulator - direct-summation gravitational integration")
    
    # Initial conditions
    parser.add_argument('-f', '--file', type=str, default=None,
                       help='CSV file with initial conditions. Must contain headers pos_x, pos_y, '
                            'pos_z, vel_x, vel_y, vel_z, mass (mass is G*m)')
    parser.add_argument('--preset', type=str, default=None, choices=list_presets(),
                       help='Use a built-in initial condition instead of a file')
    
    # Simulation parameters
    parser.add_argument('-t', '--tick', type=float, default=None,
                       help='Tick duration (default: 1e-3)')
    parser.add_argument('-s', '--sim', type=str, default=None, choices=list_integrators(),
                       help='Simulation method (default: forward-euler)')
    parser.add_argument('-d', '--dur', type=float, default=None,
                       help='Duration of simulation')
    parser.add_argument('-r', '--rest-frame', type=int, default=None,
                       help='Present the final output in the rest frame of the body at this index. '
                            'If the index is out of bounds, the default frame is used.')
    parser.add_argument('--config', type=str, default=None,
                       help='JSON or YAML config file supplying defaults for the options above')
    
    # Output
    parser.add_argument('--energy', action='store_true',
                       help='Print initial and final energy and the relative drift')
    parser.add_argument('--save-state', type=str, default=None,
                       help='Save final state to file (.npz or .json)')
    parser.add_argument('--plot', type=str, default=None,
                       help='Save a trajectory plot to this image file')
    parser.add_argument('--record-every', type=int, default=None,
                       help='Record trajectory every N ticks for --plot (default: 1)')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                       help='Increase log verbosity (-v info, -vv debug)')
    return parser


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    
    try:
        config = resolve_config(args)
        run_simulation(config, show_energy=args.energy)
    except InitialConditionsError as e:
        fail(f"Cannot read initial conditions: {e}")
    except (OSError, ValueError) as e:
        fail(str(e))


if __name__ == "__main__":
    main()
