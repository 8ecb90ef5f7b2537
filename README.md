# algokit

A collection of classic algorithm exercises written as small, plain Python
functions and classes. It is meant for studying and for trying things out.
It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.basics` | `kids_with_candies`, `shuffle`, `running_sum`, `num_jewels_in_stones`, `unique_morse_representations`, `defang_ip_addr`, `subtract_product_and_sum`, `score_of_string`, `merge_alternately` |
| `algokit.hashing` | `two_sum`, `contains_duplicate`, `is_anagram`, `group_anagrams`, `top_k_frequent`, `product_except_self`, `is_valid_sudoku`, `encode` / `decode`, `longest_consecutive` |
| `algokit.two_pointers` | `is_palindrome`, `two_sum_sorted`, `three_sum`, `max_area` |
| `algokit.sliding_window` | `max_profit`, `length_of_longest_substring`, `character_replacement`, `check_inclusion` |
| `algokit.stack` | `is_valid_parentheses`, `MinStack`, `eval_rpn`, `generate_parenthesis`, `daily_temperatures`, `car_fleet` |
| `algokit.binary_search` | `binary_search`, `search_matrix`, `min_eating_speed`, `find_min`, `search_rotated`, `TimeMap` |
| `algokit.linked_list` | `ListNode`, `RandomNode`, `build_list`, `list_values`, `reverse_list`, `merge_two_lists`, `reorder_list`, `remove_nth_from_end`, `copy_random_list`, `add_two_numbers`, `has_cycle`, `find_duplicate`, `find_duplicate_floyd` |
| `algokit.trees` | `TreeNode`, `max_depth`, `max_depth_bfs`, `invert_tree`, `invert_tree_bfs` |
| `algokit.lru` | `LRUCache` |

## Examples

```python
from algokit.hashing import two_sum, encode, decode
from algokit.stack import eval_rpn, MinStack
from algokit.binary_search import TimeMap
from algokit.linked_list import build_list, reverse_list, list_values
from algokit.lru import LRUCache

two_sum([2, 7, 11, 15], 9)            # [0, 1]
decode(encode(["neet", "code"]))      # ['neet', 'code']
eval_rpn(["2", "1", "+", "3", "*"])   # 9

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                        # 1
stack.pop()                            # 1

times = TimeMap()
times.set("foo", "bar", 1)
times.get("foo", 3)                    # 'bar'

list_values(reverse_list(build_list([1, 2, 4])))  # [4, 2, 1]

cache = LRUCache(2)
cache.put(1, 1)
cache.get(1)                           # 1
cache.get(2)                           # -1
```

## Behaviour worth knowing

- "Not found" results follow the exercises' conventions: `two_sum` returns
  `[]`, `two_sum_sorted` returns `[0, 0]`, `binary_search`,
  `search_rotated`, `find_duplicate` and `LRUCache.get` return `-1`, and
  `TimeMap.get` returns `""`.
- Invalid input raises: `ValueError` for a malformed sudoku board, a
  malformed `decode` string, an unknown `eval_rpn` token or missing operands,
  letters outside `a`-`z` in `check_inclusion` and
  `unique_morse_representations`, an empty `max_profit` or `find_min`
  input, and an out-of-range `n` in `shuffle` or `remove_nth_from_end`.
  `MinStack.pop`, `top` and `get_min` raise `IndexError` on an empty stack.
- `eval_rpn` truncates division towards zero.
- Linked-list and tree functions work in place on the nodes they are given,
  except `copy_random_list` and `add_two_numbers`, which build new nodes.
  `list_values` raises `ValueError` if a list contains a cycle.

## What it does not do

algokit is a library only: it has no command-line program, and it keeps
nothing on disk. Every function is meant to be imported and called from
Python.