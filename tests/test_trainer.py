import threading

import numpy as np
import pytest

from feedforward.errors import InvalidArgument, ReachedLocalErrorMinimum
from feedforward.network import activate_network, initialize_network, network_outputs
from feedforward.pattern import Pattern
from feedforward.progress import ErrorHistory, silent
from feedforward.trainer import (
    Predictor,
    TrainingState,
    run_iteration,
    squared_error,
    train,
    train_pattern,
)


def test_large_acceptable_error_converges_in_one_iteration(xor_patterns):
    history = ErrorHistory()
    predictor = train([2, 2, 1], xor_patterns, 1000, 0, progress=history)
    assert predictor.iterations == 1
    assert history.iterations == [1]
    assert 0 <= history.errors[0] <= 4


def test_unreachable_error_fails_after_the_cap(xor_patterns):
    history = ErrorHistory()
    with pytest.raises(ReachedLocalErrorMinimum) as info:
        train([2, 2, 1], xor_patterns, 0.0, 1, iteration_cap=5, progress=history)
    assert history.iterations == [1, 2, 3, 4, 5]
    assert info.value.iterations == 5
    assert info.value.best_error == min(history.errors)


def test_xor_converges_or_reports_local_minimum(xor_patterns):
    try:
        predictor = train([2, 2, 1], xor_patterns, 0.1, 0, iteration_cap=5000, progress=silent)
    except ReachedLocalErrorMinimum:
        return
    for pattern in xor_patterns:
        (output,) = predictor(pattern.inputs)
        assert output == pytest.approx(pattern.outputs[0], abs=0.2)


@pytest.mark.parametrize("seed, iterations_needed", [(3, 1251), (5, 582)])
def test_xor_converges_with_known_good_seed(xor_patterns, seed, iterations_needed):
    predictor = train([2, 2, 1], xor_patterns, 0.1, seed, iteration_cap=5000, progress=silent)
    assert predictor.iterations == iterations_needed
    assert predictor.total_error <= 0.1
    for pattern in xor_patterns:
        (output,) = predictor(pattern.inputs)
        assert output == pytest.approx(pattern.outputs[0], abs=0.2)


def test_total_error_is_measured_before_each_adjustment(xor_patterns, rng):
    network = initialize_network([2, 2, 1], rng)
    expected_total = 0.0
    current = network
    for pattern in xor_patterns:
        outputs = network_outputs(activate_network(current, pattern.inputs))
        expected_total += squared_error(outputs, pattern.outputs)
        current = train_pattern(TrainingState(0.0, current), pattern).network

    state = run_iteration(network, xor_patterns)
    assert state.total_error == pytest.approx(expected_total)
    assert state.network == current


def test_reported_error_matches_iteration_from_the_seeded_network(xor_patterns):
    history = ErrorHistory()
    train([2, 2, 1], xor_patterns, 1000, 3, progress=history)
    network = initialize_network([2, 2, 1], np.random.default_rng(3))
    assert history.errors[0] == pytest.approx(run_iteration(network, xor_patterns).total_error)


def test_training_is_repeatable_with_same_seed(xor_patterns):
    first, second = ErrorHistory(), ErrorHistory()
    with pytest.raises(ReachedLocalErrorMinimum):
        train([2, 3, 1], xor_patterns, 0.0, 11, iteration_cap=4, progress=first)
    with pytest.raises(ReachedLocalErrorMinimum):
        train([2, 3, 1], xor_patterns, 0.0, np.random.default_rng(11), iteration_cap=4, progress=second)
    assert first.errors == second.errors


def test_failing_progress_reporter_does_not_stop_training(xor_patterns, capsys):
    def broken(iteration, total_error):
        raise RuntimeError("display went away")

    predictor = train([2, 2, 1], xor_patterns, 1000, 0, progress=broken)
    assert predictor.iterations == 1
    assert "display went away" in capsys.readouterr().out


def test_default_progress_prints_each_iteration(xor_patterns, capsys):
    train([2, 2, 1], xor_patterns, 1000, 0)
    assert "Iteration 1\tError" in capsys.readouterr().out


@pytest.mark.parametrize("kwargs", [
    dict(layer_sizes=[2]),
    dict(layer_sizes=[2, 0, 1]),
    dict(acceptable_error=-0.5),
    dict(acceptable_error=float("nan")),
    dict(iteration_cap=0),
    dict(iteration_cap=-3),
    dict(patterns=[]),
    dict(layer_sizes=[3, 2, 1]),
    dict(layer_sizes=[2, 2, 2]),
    dict(random_source="seed"),
])
def test_bad_configuration_is_rejected(kwargs, xor_patterns):
    arguments = dict(
        layer_sizes=[2, 2, 1],
        patterns=xor_patterns,
        acceptable_error=0.1,
        random_source=0,
        iteration_cap=10,
        progress=silent,
    )
    arguments.update(kwargs)
    with pytest.raises(InvalidArgument):
        train(**arguments)


def test_configuration_is_checked_before_training(xor_patterns):
    history = ErrorHistory()
    patterns = xor_patterns + [Pattern([0, 1, 1], [1])]
    with pytest.raises(InvalidArgument):
        train([2, 2, 1], patterns, 1000, 0, progress=history)
    assert len(history) == 0


def test_predictor_rejects_wrong_input_length(xor_patterns):
    predictor = train([2, 2, 1], xor_patterns, 1000, 0, progress=silent)
    with pytest.raises(InvalidArgument):
        predictor([1.0])
    with pytest.raises(InvalidArgument):
        predictor([1.0, 0.0, 0.0])


def test_predictor_accepts_any_iterable_of_inputs(xor_patterns):
    predictor = train([2, 2, 1], xor_patterns, 1000, 0, progress=silent)
    assert predictor(value for value in [1.0, 0.0]) == predictor([1.0, 0.0])
    assert predictor(iter((0.0, 1.0))) == predictor((0.0, 1.0))


def test_predictor_rejects_wrong_length_generator(xor_patterns):
    predictor = train([2, 2, 1], xor_patterns, 1000, 0, progress=silent)
    with pytest.raises(InvalidArgument):
        predictor(value for value in [1.0])
    with pytest.raises(InvalidArgument):
        predictor(iter([]))


def test_predictor_returns_output_layer_values(xor_patterns):
    predictor = train([2, 3, 2], [Pattern([0, 1], [1, 0])], 1000, 5, progress=silent)
    outputs = predictor([0, 1])
    assert len(outputs) == 2
    assert all(0.0 < value < 1.0 for value in outputs)
    assert predictor.layer_sizes == [2, 3, 2]
    assert outputs == network_outputs(activate_network(predictor.network, [0, 1]))


def test_predictor_is_pure():
    network = initialize_network([2, 2, 1], np.random.default_rng(0))
    predictor = Predictor(network)
    first = predictor([0.5, 0.5])
    predictor([1.0, 0.0])
    assert predictor([0.5, 0.5]) == first
    assert predictor.network is network


def test_predictor_can_be_shared_between_threads():
    predictor = Predictor(initialize_network([2, 4, 1], np.random.default_rng(9)))
    expected = predictor([0.3, 0.6])
    results = []

    def worker():
        for _ in range(50):
            results.append(predictor([0.3, 0.6]))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results == [expected] * 200
