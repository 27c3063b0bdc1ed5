import sys
from typing import List, Optional

from .config import TrainingConfig
from .dataset import load_patterns
from .errors import InvalidArgument, ReachedLocalErrorMinimum
from .network import print_network_summary
from .progress import ErrorHistory, combine, print_progress
from .trainer import train


def main(argv: Optional[List[str]] = None) -> int:
    config = TrainingConfig.from_args(argv)

    print("\n" + "="*60)
    print("FEED-FORWARD BACKPROPAGATION - TRAINING")
    print("="*60)

    try:
        patterns = load_patterns(config.dataset, config.number_of_inputs)
    except (OSError, InvalidArgument) as e:
        print(f"  ✗ Failed to load dataset: {e}")
        return 2

    layer_sizes = config.layer_sizes(len(patterns[0].outputs))
    print(f"Dataset: {config.dataset} ({len(patterns)} patterns)")
    print(f"Layer sizes: {layer_sizes}")
    print(f"Acceptable error: {config.acceptable_error}, iteration cap: {config.iteration_cap}")
    print("-"*60)

    history = ErrorHistory()
    predictor = None
    for attempt in range(config.retries + 1):
        seed = config.seed + attempt
        history.reset()
        print(f"\nAttempt {attempt + 1} (seed {seed})")
        try:
            predictor = train(
                layer_sizes,
                patterns,
                config.acceptable_error,
                seed,
                iteration_cap=config.iteration_cap,
                progress=combine(print_progress, history),
            )
            break
        except ReachedLocalErrorMinimum as e:
            print(f"  ✗ {e}")
            print(f"  Final iteration error: {history.last_error:.4f}")
        except InvalidArgument as e:
            print(f"  ✗ Invalid configuration: {e}")
            return 2

    if predictor is None:
        print(f"\nNo attempt converged after {config.retries + 1} seeds")
        return 1

    print(f"\n  ✓ Converged after {predictor.iterations} iterations "
          f"(error {predictor.total_error:.4f})")
    print_network_summary(predictor.network)

    print("Predictions:")
    for pattern in patterns:
        outputs = predictor(pattern.inputs)
        print(f"  {list(pattern.inputs)} -> "
              f"[{', '.join(f'{value:.3f}' for value in outputs)}] "
              f"(expected {list(pattern.outputs)})")

    if config.plot_path:
        history.plot(config.plot_path, acceptable_error=config.acceptable_error)

    print("="*60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
