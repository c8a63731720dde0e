# contestsolvers

Solutions to a collection of well-known programming-contest problems.
Each one is a plain Python function that takes ordinary values and
returns the answer, so there is no contest input to parse.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The problems are grouped by theme:

- `contestsolvers.strings`: `compare_ignore_case`, `boy_or_girl`,
  `capitalize_word`, `fix_case`, `abbreviate`, `count_xxx`,
  `assemble_word`, `bit_plus_plus` and `helpful_maths`.
- `contestsolvers.arithmetic`: `watermelon`, `domino_piling`,
  `lottery_bills`, `years_to_exceed`, `two_three_moves`, `divide_to_one`,
  `only_one_digit`, `count_system_solutions`, `horseshoes_to_buy`,
  `arithmetic_array` and `election_votes`.
- `contestsolvers.arrays`: `next_round`, `equal_candies`,
  `can_be_increasing`, `good_kid_product`, `team_problems`,
  `descending_permutation`, `sereja_and_dima`, `choosing_teams`,
  `can_pass_all_levels`, `form_teams` and `good_matrix_sum`.
- `contestsolvers.gym`: assorted problems, among them `pig_latin_word`,
  `pig_latin_line`, `walk`, `coin_steps`, `drives_needed`,
  `final_direction`, `parity_steps`, `best_ingredients`,
  `can_split_evenly`, `total_time`, `circle_intersection`,
  `sign_documents`, `rook_moves`, `grid_word`, `game_winner`,
  `cheapest_option`, `max_k`, and the prime helpers `sieve`, `is_prime`
  and `gcd_in_range` (which sieves up to 31623 itself when no flags are
  given).
- `contestsolvers.tap`: `has_no_i`, the `TreeNode` helpers `build_tree`,
  `preorder` and `render_tree`, `transpose_note`, `digit_at`,
  `diminutive`, the `Bank` checks `banks_collide` and `any_intersection`,
  and the grade comparisons `method_a`, `method_b`,
  `essentially_equal` and `compare_methods`.

Functions raise `ValueError` on input they cannot answer, for example
`divide_to_one(0)`, `transpose_note(1, "H")` or a non-square matrix
passed to `good_matrix_sum`.

Example:

```python
from contestsolvers.strings import abbreviate
from contestsolvers.arithmetic import lottery_bills
from contestsolvers.gym import pig_latin_line

abbreviate("localization")      # "l10n"
lottery_bills(125)              # 3
pig_latin_line("Hello world")   # "Ellohay orldway"
```

## Command line

Installing the package provides the `contestsolvers` command. It takes
the name of a problem, reads whitespace-separated integers from standard
input and prints the answer:

- `contestsolvers teams`: the count `n`, then `n` skills (1, 2 or 3).
  Prints the number of teams, then one line per team with the 1-based
  indices of its programmer, mathematician and athlete.
- `contestsolvers sign`: `n` and `k`. Prints `Yes` if document `k` gets
  signed (or `No` if not and any action was taken), then the number of
  actions.
- `contestsolvers tree`: `n`, `k`, then `k` light values. Prints the
  preorder listing of the Fibonacci call tree of `n`, lit nodes
  highlighted with terminal colour codes.

```
echo "7 1 3 1 3 2 1 2" | contestsolvers teams
```

Malformed or incomplete input prints `error: ...` to standard error and
exits with status 1. `contestsolvers --help` lists the problems.

## What it does not do

Only the three problems above have a command; every other problem is
available as a library function only, and the package does not read or
parse their input formats.