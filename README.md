# cabernet

Building blocks for training a classifier with gradients: a shaped float
storage, tensors that own or share a gradient, a negative log-likelihood loss
and a standard-score normalizer. Everything is stored as 32-bit floats in
NumPy arrays.

## Modules

- `cabernet.array.Array`: a flat block of floats viewed through a shape.
  It has `shape`, `size`, `rank` and `data` (the flat storage; writing to it
  changes the array). `reshape` keeps the leading elements and zero-fills the
  rest, `melt` flattens the shape to one dimension, `collapse` drops the shape
  and size, `copy` takes the shape and a copy of another array's elements,
  `move` takes another array's storage and leaves it empty, and `clear`
  releases everything. Iterating yields the stored values; `len` is the
  number of stored elements.
- `cabernet.tensor.Tensor`: an `Array` that takes part in a computation
  graph. A leaf tensor created with `requires_gradient=True` owns a gradient
  tensor of its own shape; setting `requires_gradient` creates or drops it.
  `forward` returns the tensor itself, `backward(gradient)` adds the incoming
  gradient into the tensor's gradient (and raises `RuntimeError` if there is
  none), and `add` / `multiply` work element by element in place, raising
  `ValueError` when shapes differ. `copy` between two leaves copies the
  gradient; otherwise the gradient is shared.
- `cabernet.tensor.Expression`: base class for non-leaf nodes.
- `cabernet.tensor.Graph`: a process-wide buffer with the class methods
  `add`, `flush` and `tensors`, which keeps graph tensors alive until flushed.
- `cabernet.criterions.NLLLoss`: negative log-likelihood over an output of
  shape `(batch, ...)` holding log-probabilities and a sequence of integer
  targets, averaged over the batch. `loss()` returns the value; `backward()`
  sends the gradient into the output. Targets outside the class range raise
  `IndexError`; too few targets raise `ValueError`. `Criterion` is the
  abstract base.
- `cabernet.normalizers.Standard`: standardises a feature vector to zero mean
  and unit population standard deviation, with `fit`, `transform`,
  `fit_transform` and `inverse_transform`. Fitting an empty or constant
  vector raises `ValueError`; transforming before fitting raises
  `RuntimeError`. `Normalizer` is the abstract base.

## Installation

```
pip install .
```

## Example

```python
from cabernet.tensor import Tensor
from cabernet.criterions import NLLLoss

output = Tensor((2, 3), requires_gradient=True)
output.data[:] = [-1.0, -2.0, -3.0, -0.5, -1.5, -2.5]

criterion = NLLLoss(output, [0, 2])
print(criterion.loss())        # 1.75
criterion.backward()
print(list(output.gradient))   # [-0.5, 0.0, 0.0, 0.0, 0.0, -0.5]
```

Normalizing a feature vector and undoing it:

```python
from cabernet.normalizers import Standard

normalizer = Standard()
scaled = normalizer.fit_transform([1.0, 2.0, 3.0, 4.0])
restored = normalizer.inverse_transform(scaled)
```

## What it does not do

The package has no layers, activation functions, matrix products or
optimizers, so a network's forward pass and parameter updates have to be
written by the user on top of `Tensor`. It also does not read datasets from
disk or split them into batches: feature and target values are supplied by
the caller.

## Tests

```
pip install .[test]
pytest
```