import unittest

import numpy

from ffnn.core.dataset import (
    Dataset, TRAINING_DATASET_KEY, VALIDATION_DATASET_KEY)
from ffnn.core.exception import DatasetShapeMismatch
from ffnn.core.structure import Structure


class TestDataset(unittest.TestCase):

    def setUp(self):
        self.random_state = numpy.random.RandomState(1234)
        self.structure = Structure(inputs=3, hidden=4, outputs=2)

        self.training_inputs = self.random_state.randn(5, 3)
        self.training_labels = self.random_state.randn(5, 2)
        self.validation_inputs = self.random_state.randn(2, 3)
        self.validation_labels = self.random_state.randn(2, 2)

    def _make_dataset(self, **kwargs):
        data = dict(
            training_inputs=self.training_inputs,
            training_labels=self.training_labels,
            validation_inputs=self.validation_inputs,
            validation_labels=self.validation_labels,
        )
        data.update(kwargs)
        return Dataset(self.structure, **data)

    def test_valid_dataset(self):
        dataset = self._make_dataset()

        self.assertEqual(dataset.n_training, 5)
        self.assertEqual(dataset.n_validation, 2)
        numpy.testing.assert_array_equal(
            dataset.training_inputs, self.training_inputs)
        numpy.testing.assert_array_equal(
            dataset.validation_labels, self.validation_labels)

    def test_accepts_lists(self):
        dataset = Dataset(
            Structure(1, 1, 1),
            training_inputs=[[0.0], [1.0]], training_labels=[[1.0], [0.0]],
            validation_inputs=[[0.5]], validation_labels=[[0.5]])

        self.assertEqual(dataset.training_inputs.shape, (2, 1))
        self.assertEqual(dataset.training_inputs.dtype, numpy.float64)

    def test_training_count_mismatch(self):
        with self.assertRaises(DatasetShapeMismatch) as context:
            self._make_dataset(training_labels=self.training_labels[:4])

        self.assertIn(TRAINING_DATASET_KEY, str(context.exception))

    def test_validation_count_mismatch(self):
        with self.assertRaises(DatasetShapeMismatch) as context:
            self._make_dataset(validation_inputs=self.validation_inputs[:1])

        self.assertIn(VALIDATION_DATASET_KEY, str(context.exception))

    def test_validation_vector_wrong_length(self):
        validation_inputs = [[0.0, 1.0, 2.0], [0.0, 1.0]]

        with self.assertRaises(DatasetShapeMismatch) as context:
            self._make_dataset(validation_inputs=validation_inputs)

        self.assertIn('validation_inputs[1]', str(context.exception))

    def test_training_label_wrong_length(self):
        training_labels = self.random_state.randn(5, 3)

        with self.assertRaises(DatasetShapeMismatch) as context:
            self._make_dataset(training_labels=training_labels)

        self.assertIn('training_labels[0]', str(context.exception))

    def test_scalar_vectors_rejected(self):
        with self.assertRaises(DatasetShapeMismatch) as context:
            Dataset(Structure(1, 1, 1),
                    training_inputs=[0.0, 1.0], training_labels=[[1.0], [0.0]],
                    validation_inputs=[[0.5]], validation_labels=[[0.5]])

        message = str(context.exception)
        self.assertIn('training_inputs[0]', message)
        self.assertIn('0 dimension(s)', message)
        self.assertNotIn('length', message)

    def test_empty_split(self):
        with self.assertRaises(DatasetShapeMismatch):
            self._make_dataset(validation_inputs=[], validation_labels=[])

    def test_bad_structure_type(self):
        with self.assertRaises(TypeError):
            Dataset((3, 4, 2), self.training_inputs, self.training_labels,
                    self.validation_inputs, self.validation_labels)

    def test_read_only(self):
        dataset = self._make_dataset()

        with self.assertRaises(ValueError):
            dataset.training_inputs[0, 0] = 100.0

    def test_copies_data(self):
        dataset = self._make_dataset()
        original = self.training_inputs[0, 0]

        self.training_inputs[0, 0] = original + 1.0

        self.assertEqual(dataset.training_inputs[0, 0], original)

    def test_iterate_examples(self):
        dataset = self._make_dataset()

        examples = list(dataset.training_examples())

        self.assertEqual([example.index for example in examples],
                         list(range(5)))
        for example in examples:
            numpy.testing.assert_array_equal(
                example.input, self.training_inputs[example.index])
            numpy.testing.assert_array_equal(
                example.label, self.training_labels[example.index])

        self.assertEqual(len(list(dataset.validation_examples())), 2)

    def test_iterate_examples_bad_key(self):
        dataset = self._make_dataset()

        with self.assertRaises(ValueError):
            list(dataset.iterate_examples('testing'))

    def test_from_split(self):
        inputs = self.random_state.randn(10, 3)
        labels = self.random_state.randn(10, 2)

        dataset = Dataset.from_split(
            self.structure, inputs, labels, validation_size=0.2,
            random_state=numpy.random.RandomState(0))

        self.assertEqual(dataset.n_training, 8)
        self.assertEqual(dataset.n_validation, 2)

        # Every example lands in exactly one split, still paired
        all_inputs = numpy.vstack(
            [dataset.training_inputs, dataset.validation_inputs])
        all_labels = numpy.vstack(
            [dataset.training_labels, dataset.validation_labels])
        order = [int(numpy.argmin(numpy.abs(inputs - x).sum(axis=1)))
                 for x in all_inputs]

        self.assertEqual(sorted(order), list(range(10)))
        numpy.testing.assert_array_equal(all_labels, labels[order])

    def test_from_split_reproducible(self):
        inputs = self.random_state.randn(10, 3)
        labels = self.random_state.randn(10, 2)

        first = Dataset.from_split(
            self.structure, inputs, labels,
            random_state=numpy.random.RandomState(7))
        second = Dataset.from_split(
            self.structure, inputs, labels,
            random_state=numpy.random.RandomState(7))

        numpy.testing.assert_array_equal(
            first.validation_inputs, second.validation_inputs)

    def test_from_split_warns_without_random_state(self):
        inputs = self.random_state.randn(10, 3)
        labels = self.random_state.randn(10, 2)

        with self.assertLogs('ffnn.core.dataset', level='WARNING'):
            Dataset.from_split(self.structure, inputs, labels)

    def test_from_split_count_mismatch(self):
        with self.assertRaises(DatasetShapeMismatch):
            Dataset.from_split(
                self.structure, self.random_state.randn(10, 3),
                self.random_state.randn(9, 2),
                random_state=numpy.random.RandomState(0))

    def test_from_split_bad_random_state(self):
        with self.assertRaises(TypeError):
            Dataset.from_split(
                self.structure, self.random_state.randn(10, 3),
                self.random_state.randn(10, 2), random_state=1234)


if __name__ == '__main__':
    unittest.main()
