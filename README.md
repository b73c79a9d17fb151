# stackswap

stackswap solves the two-stack sorting puzzle. You start with distinct
integers on stack `a` and an empty stack `b`. Using only the instructions
below, you must leave every number on `a` in ascending order from the top,
with `b` empty.

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both upward (the top goes to the bottom) |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both downward (the bottom goes to the top) |

An instruction that cannot act, such as swapping a stack that holds fewer than
two elements or pushing from an empty stack, does nothing.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`.

## Commands

### push-swap

```
push-swap 3 2 5 1 4
push-swap "3 2 5" 1 4
```

This command prints one instruction per line. The instructions sort the
numbers you give it. You can give the numbers as separate arguments, as one
quoted string, or as a mix of both. Any ASCII whitespace separates them.

The command does nothing when:

- you give no arguments;
- the numbers are already in ascending order;
- you give only one number.

Two numbers take a single `sa`. Up to five numbers use a fixed strategy. More
than five use a partition-and-insert strategy, which pushes the cheapest
element back to `a` first.

The command writes `Error` to standard error and exits with status 1 in these
cases:

- an argument is empty;
- a token is not an optionally signed run of decimal digits;
- a number lies outside the 32-bit signed range;
- a number is repeated.

### push-swap-checker

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker takes the same arguments as `push-swap`. It reads instructions
from standard input, one per line, and each line must end with a newline. It
then prints `OK` when `a` holds all the numbers in ascending order and `b` is
empty. Otherwise it prints `KO`.

The checker writes `Error` to standard error and exits with status 1 in these
cases:

- the arguments are invalid;
- the arguments hold no numbers;
- an instruction is unknown;
- an instruction line has no newline at its end.

With no arguments at all, the checker does nothing.

### gimme-numbers

```
gimme-numbers 100
```

This command prints the requested count of distinct random integers between 1
and 1000 on one line, each followed by a space. It does nothing unless it gets
exactly one argument. The argument is read like C's `atoi`, so text that is
not a number counts as 0. A count of 0 or less prints an empty line. A count
above 1000 fails with a `ValueError`.

Each command can also be run as a module, for example
`python -m stackswap.solver 3 2 1`.

## Library use

```python
from stackswap.solver import solve
from stackswap.stacks import Stacks

instructions = solve([3, 2, 5, 1, 4])

stacks = Stacks([3, 2, 5, 1, 4])
for name in instructions:
    stacks.apply(name)
assert stacks.is_sorted()
```

- `stackswap.stacks.Stacks` holds `stack_a` and `stack_b`, with index 0 as the
  top of each. It has one method per instruction. `apply(name)` runs an
  instruction by name, and an unknown name raises `ValueError`.
  `execute(name)` does the same and also appends the name to `operations`.
  `is_sorted()` is true when `b` is empty and `a` is ascending.
  `stackswap.stacks.get_state` classifies a sequence as a `State`.
- `stackswap.solver.solve(values)` returns the instruction names that sort
  distinct integers. `sort_stacks(stacks)` sorts a `Stacks` whose `a` holds
  ranks 1..n and records the instructions on it.
- `stackswap.parsing.parse_arguments(args)` turns command-line style arguments
  into ranks 1..n, and raises `InputError` on invalid input. The module also
  provides `atoi`, `split_whitespace`, `check_token` and `rank`.
- `stackswap.simple_sort` (`sort_three`, `sort_simple`) and
  `stackswap.complex_sort` (`sort_complex` and its steps, with the `Move`
  record) hold the two strategies.
- `stackswap.checker.run_checker(values, lines)` applies newline-terminated
  instruction lines to the values and reports whether they end sorted.
  `parse_instruction(line)` validates a single line.
- `stackswap.gimme.generate_numbers(count, rng=None)` returns distinct random
  integers from 1 to 1000. You can pass a `random.Random` as `rng`.