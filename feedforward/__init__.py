"""
Feed-Forward Backpropagation Package

Trains a fully-connected feed-forward network with online backpropagation and
a sigmoid activation. Every training phase builds a new immutable network
value; the trained network is wrapped in a Predictor.
"""

from .errors import FeedforwardError, InvalidArgument, NetworkConsistencyError, ReachedLocalErrorMinimum
from .pattern import Pattern
from .scan import scan, scan_back
from .neuron import Neuron, sigmoid
from .network import activate_network, initialize_network
from .backward import adjust_weights, propagate_error_back
from .trainer import Predictor, train
from .dataset import load_patterns
from .progress import ErrorHistory, print_progress

__all__ = [
    'FeedforwardError',
    'InvalidArgument',
    'NetworkConsistencyError',
    'ReachedLocalErrorMinimum',
    'Pattern',
    'scan',
    'scan_back',
    'Neuron',
    'sigmoid',
    'activate_network',
    'initialize_network',
    'adjust_weights',
    'propagate_error_back',
    'Predictor',
    'train',
    'load_patterns',
    'ErrorHistory',
    'print_progress',
]
