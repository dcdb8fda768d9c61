import logging

import matplotlib.pyplot as plt
import numpy as np

from ffnn import Configuration, Dataset, NeuralNet, Structure
from ffnn.core.logger import setup_logging
from ffnn.functions import activation, cost
from ffnn.util.on_epoch import log_progress
from ffnn.visualize import plot_training_history


setup_logging(filename='xor-log.txt', level=logging.INFO)

random_state = np.random.RandomState(1234)


# The XOR truth table #########################################################

inputs = [[0., 0.], [0., 1.], [1., 0.], [1., 1.]]
labels = [[0.], [1.], [1.], [0.]]

structure = Structure(inputs=2, hidden=4, outputs=1)

# Every example is needed to learn XOR, so validate on the training data
dataset = Dataset(structure,
                  training_inputs=inputs, training_labels=labels,
                  validation_inputs=inputs, validation_labels=labels)

# Set up the network and train it #############################################

config = Configuration(
    hidden_activation=activation.hyperbolic_tangent,
    output_activation=activation.sigmoid,
    cost=cost.cross_entropy,
    learning_rate=0.5,
    momentum=0.5,
)

net = NeuralNet(structure, config, random_state=random_state)

threshold = 0.05
costs = net.train(dataset, error_threshold=threshold, max_epochs=20000,
                  on_epoch=log_progress(every=100))

for x, y in zip(inputs, labels):
    print("{} => {:.3f} (label {})".format(x, net.infer(x)[0], y[0]))

net.save('xor-net.h5')

# Reload and check the weights survived the round trip
reloaded = NeuralNet.load('xor-net.h5')
assert np.array_equal(reloaded.all_weights(), net.all_weights())

plot_training_history(costs, threshold=threshold)
plt.show()
