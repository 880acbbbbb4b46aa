# drillkit

A collection of small, self-contained programming drills, each usable as a
library and as a console command:

| Module              | What it does                                                          |
|---------------------|-----------------------------------------------------------------------|
| `drillkit.reverse`  | Reverses the decimal digits of a signed 64-bit integer, 0 on overflow |
| `drillkit.counting` | Counts occurrences of a value in a sorted list with binary search     |
| `drillkit.pets`     | Reads `owner,type,name,age` records and answers questions about them   |
| `drillkit.linked`   | Singly linked list that can reverse its last `k` elements in place    |
| `drillkit.stack`    | LIFO stack with push, pop and peek                                    |
| `drillkit.tree`     | Flattens a binary tree into a doubly linked list in in-order sequence |
| `drillkit.bulls`    | Rules of Bulls and Cows: secret generation, validation, scoring       |
| `drillkit.game`     | Interactive Bulls and Cows game                                       |

No third-party dependencies are needed. The console prompts and messages
are in Russian.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from drillkit.reverse import reverse_digits
from drillkit.counting import count_occurrences, find_first, find_last
from drillkit.linked import LinkedList
from drillkit.stack import Stack, EmptyStackError
from drillkit.bulls import check, is_valid

reverse_digits(-123)                  # -321
reverse_digits(9_000_000_000_000_000_009)  # raises ValueError: not a 64-bit value

values = [1, 2, 2, 2, 5]
find_first(values, 2), find_last(values, 2)   # (1, 3)
find_first(values, 4)                         # None
count_occurrences(values, 2)                  # 3

chain = LinkedList([1, 2, 3, 4, 5])
chain.reflect_from_tail(4)
str(chain)                            # "1 - 5 - 4 - 3 - 2"

stack = Stack()
stack.push(10)
stack.push(20)
stack.peek()                          # 20
stack.pop()                           # 20
stack.pop()                           # 10
stack.pop()                           # raises EmptyStackError (an IndexError)

is_valid("1234")                      # True
is_valid("1123")                      # False: digits must differ
check("1234", "1243")                 # GuessResult(bulls=2, cows=2)
```

`counting.random_sorted(n, max_value, rng)` and
`bulls.generate_number(rng)` accept an optional `random.Random` so results
can be reproduced.

Pet records are parsed from lines such as `Anna,cat,Murka,3`; lines with a
malformed layout or age are skipped and reported as a logging warning:

```python
from drillkit.pets import (
    parse_pets, distinct_types_per_owner, age_range_by_type,
    owners_and_names_by_type, count_types_with_name,
)

pets = parse_pets(["Anna,cat,Murka,3", "Anna,dog,Rex,5", "Ivan,cat,Tom,7"])
distinct_types_per_owner(pets)        # {"Anna": 2, "Ivan": 1}
age_range_by_type(pets)               # {"cat": (3, 7), "dog": (5, 5)}
owners_and_names_by_type(pets, "cat") # [("Anna", "Murka"), ("Ivan", "Tom")]
count_types_with_name(pets, "Rex")    # 1
```

`read_pets(path)` reads the same format from a UTF-8 file.

Trees are built from `TreeNode` objects; `to_doubly_linked(root)` links
them through `prev`/`next` and returns the head, and `format_list(head)`
renders it as `25 <-> 12 <-> 30`.

## Commands

```
drillkit-reverse [N]   # print N (or a number read from stdin) with digits reversed
drillkit-count         # build a random sorted list and count a value in it
drillkit-pets [FILE]   # menu over pet records in FILE (default data.txt)
drillkit-list          # demonstrate reversing the tail of a linked list
drillkit-stack         # demonstrate stack operations
drillkit-tree          # flatten a sample tree into a doubly linked list
drillkit-bulls         # play Bulls and Cows against the computer
```

`drillkit-pets` keeps showing its menu until an entry other than 1 to 4 is
given. In `drillkit-bulls` the computer picks a four-digit number with no
repeated digits (it may start with zero). After each guess it reports
*bulls* (right digit, right place) and *cows* (right digit, wrong place)
until the number is found; the command exits with status 1 if input ends
first.