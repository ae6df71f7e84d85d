# gaussrow

gaussrow reads an augmented matrix `[A | b]` from a delimited text file. It reduces the
matrix by Gaussian elimination with partial pivoting and then eliminates back upwards. It
reports whether the system has one solution, infinitely many, or none. The reduced matrix
is written back out in the same format.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
gaussrow [FILENAME] [DELIMITER] [-o OUTPUT]
```

- `FILENAME` is the input file. Each line is one equation, and the last column holds the
  right-hand side.
- `DELIMITER` is a single character, such as `,` or `;`.
- `-o/--output` names the result file. It defaults to `GaussSolver.csv`.

If the filename or the delimiter is left out, the command asks for it. At the filename
prompt, the first word typed is used. At the delimiter prompt, the first character typed
is used; if nothing is entered, the delimiter is `,`.

The command prints three things in this order:

1. The matrix it read.
2. A message saying which case applies:
   - `One solution`, on standard output.
   - `Infinite solutions`, on standard error.
   - `No solutions, inconsistent system`, on standard error.
3. The reduced matrix.

It then writes the reduced matrix to the output file, using the same delimiter.

The command exits with status 1 and prints `Error: ...` to standard error if the file cannot
be read or does not hold a well-formed matrix. Otherwise it exits with status 0.

For example, `system.csv` might contain:

```
1,2,3,6
0,1,2,4
0,0,1,1
```

Running `gaussrow system.csv ,` reports one solution. The last column of the reduced matrix
is `-1, 2, 1`.

## Library use

```python
import numpy as np
from gaussrow.csv_io import read_matrix, write_matrix
from gaussrow.solver import SolutionKind, gauss, solve_file

m = np.array([[1.0, 2.0, 3.0, 6.0],
              [0.0, 1.0, 2.0, 4.0],
              [0.0, 0.0, 1.0, 1.0]])
reduced, kind = gauss(m)    # the input array is not modified
print(kind)                 # SolutionKind.UNIQUE
print(reduced[:, -1])       # [-1.  2.  1.]

write_matrix("system.csv", m, ",")
same = read_matrix("system.csv", ",")
kind = solve_file("system.csv", ",", "reduced.csv")
```

### gaussrow.solver

- `triangle_form(matrix)` returns a row-echelon copy of the matrix. It uses partial
  pivoting and scales each pivot to 1. Columns with no non-zero pivot candidate are skipped.
- `back_substitute(matrix)` returns a copy with the entries above each row's leading
  coefficient cleared.
- `classify(matrix)` inspects a reduced matrix and returns a `SolutionKind`:
  - `INCONSISTENT` if some row has all-zero coefficients and a non-zero right-hand side.
  - Otherwise `INFINITE` if some row has more than one non-zero coefficient.
  - Otherwise `UNIQUE`.

  Each member's value is the message the command prints.
- `gauss(matrix)` applies both steps and returns `(reduced, kind)`.
- `solve_file(filename, delimiter=",", output="GaussSolver.csv")` reads, solves, prints and
  writes as the command does, and returns the `SolutionKind`.

Matrices that are not two-dimensional raise `ValueError`.

### gaussrow.csv_io

- `read_matrix(filename, delimiter=",")` returns a 2-D float array.
  - Blank lines and a trailing empty cell are skipped.
  - Each cell is read from its leading number.
  - A file with no numbers gives a 0×0 array.
  - It raises `OSError` if the file cannot be opened.
  - It raises `CsvError`, a subclass of `ValueError`, if a cell does not start with a
    number or the rows have different lengths.
- `write_matrix(filename, matrix, delimiter=",")` writes one row per line. Values are
  formatted with six significant digits, so written values may be rounded.

## Limitations

Comparisons against zero are exact; there is no tolerance for round-off. As a result, a
system that is singular in exact arithmetic may be classified as having one solution.