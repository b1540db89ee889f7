# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It prints the moves that sort stack `a`, one per line.

## Operations

| Move  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up: the top element goes to bottom  |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down: the bottom goes to the top    |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

## Command line

You can give the numbers as separate arguments or as one space-separated
string. The first number is the top of the stack.

```
$ push-swap 2 1 3
sa
$ push-swap "3 2 1"
sa
rra
```

- With no arguments, nothing is printed.
- Input that is already sorted prints nothing.
- Some input is rejected: it prints `Error` on standard error and exits with status 1. This happens when:
  - a number holds anything other than an optional sign and digits;
  - a number lies outside the 32-bit signed range;
  - two numbers are equal;
  - the single argument is an empty string.
- When the numbers come as one string, a lone sign or a signed zero such as `-0` is also rejected.
- With separate arguments, an empty argument or a lone sign counts as zero.

Inputs of two to five numbers are sorted with fixed sequences. Longer inputs
are ranked and then sorted with a binary radix sort on the ranks.

## Library use

```python
import io
from pushswap.parsing import parse_arguments
from pushswap.stacks import PushSwap
from pushswap.sorting import assign_ranks, sort_stacks

out = io.StringIO()
stacks = PushSwap(parse_arguments(["4", "0", "-2", "7", "3", "9"]), out)
assign_ranks(stacks)   # radix sort (more than five values) works on ranks
sort_stacks(stacks)
print(out.getvalue().split())
print(stacks.a.values())
print(stacks.operations)
```

- `pushswap.parsing`:
  - `parse_int` reads one integer;
  - `is_number` tests the form of one argument;
  - `validate_input` and `check_duplicates` check a list of arguments;
  - `parse_arguments` turns command-line arguments into integers.
  - All of them raise `InputError` (a `ValueError`) on bad input.
- `pushswap.stacks` provides `Item`, `Stack`, the `Operation` enum and `PushSwap`.
  - `PushSwap.apply` takes an `Operation` or its name. It performs the move, writes the name to the output stream (standard output by default) and appends it to `operations`.
  - `sa`, `pb`, `rra` and the other methods are shortcuts for `apply`.
- `pushswap.sorting` holds the sorting routines:
  - `sort_two`, `sort_three`, `sort_four`, `sort_five` and `radix_sort`;
  - `sort_stacks`, which picks a routine by the size of stack `a`;
  - the helpers `assign_ranks`, `find_mins`, `find_position`, `move_element_to_top` and `find_max_digits`.
- `pushswap.cli.main` is the `push-swap` command.

The package also carries small general helpers:

- `pushswap.charclass`: ASCII classification, case mapping, `atoi` and `itoa`.
- `pushswap.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and `memmove` on byte buffers.
- `pushswap.textops`: string helpers such as `split`, `strtrim`, `substr`, `strnstr`, `strlcpy` and `strlcat`.
- `pushswap.linkedlist`: a singly linked `LinkedList` of `ListNode`s.
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream.

## What it does not do

There is no command that reads a list of moves back and checks whether they
sort the input. In code, you can replay moves with `PushSwap.apply` and then
test the result with `Stack.is_sorted`.

## Tests

```
pip install -e ".[test]"
pytest
```