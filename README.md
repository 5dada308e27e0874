# judgekit

A collection of solutions to short beginner online-judge problems. These include
geometry checks, grading and scoring rules, number sequences, and small string
and arithmetic puzzles. Each solution is a plain Python function. A command runs
some of the problems on text read from standard input.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from judgekit.geometry import survives, triangle_area_from_medians
from judgekit.scoring import income_tax, summarize_experiments
from judgekit.sequences import count_up, even_sum
from judgekit.basics import game_duration, classify_animal

survives(10, 0, 0, 3, 1, 1)              # True: the inner circle fits inside the outer one
triangle_area_from_medians(3, 4, 5)      # 8.0
income_tax(1500.00)                      # None: the salary is exempt
count_up(4)                              # [1, 2, 3, 4]
game_duration(16, 2)                     # 10
classify_animal("vertebrado", "ave", "carnivoro")   # "aguia"
```

The modules are grouped by theme.

- `judgekit.geometry`
  - `survives`: tests whether one circle lies inside another.
  - `triangle_area_from_medians`: raises `ValueError` when the medians cannot form a triangle.
  - `balloon_count`
  - `catch_time`: raises `ValueError` when the chaser is not faster.
- `judgekit.scoring`
  - `income_tax`
  - `summarize_experiments`: returns an `ExperimentSummary` with totals and percentage properties.
  - `is_valid_grade`
  - `average_grade`: raises `ValueError` for a grade outside 0–10.
  - `average_positive`
  - `slug_level`
  - `first_minimum_position`
  - `game_winner`
  - `fastest_runner`
  - `property_category`
  - `can_finish_today`
- `judgekit.sequences`
  - `sequence_ij` and `alphabet_codes`: generators of output lines.
  - `count_up`
  - `consecutive_sum`
  - `series_sum`
  - `odd_sum`
  - `even_sum`
  - `remaining_items`: uses division truncated toward zero.
  - `signed_total`
- `judgekit.basics`
  - `game_duration`
  - `classify_animal`
  - `triangles_in_polygon`
  - `previous_number`
  - `fits_tweet`
  - `difference`
  - `link_clicks`
  - `codename`
  - `power_label`
  - `can_say`

## Command line

```
judgekit PROBLEM < input.txt
```

`PROBLEM` is one of the following:

- `1094`: laboratory animal totals and percentages.
- `1118`: an interactive grade-average session with "novo calculo" prompts.
- `3065`: signed totals, one per block, ending at a block count of 0.

Give the input the way the judge gives it. The answer is written to standard
output in the judge's format. If the input is invalid, the command prints an
error to standard error and exits with status 1.

From Python, `judgekit.cli.run(problem, text)` returns the same output as a
string.

## Limitations

The command only handles the three problems listed above. Every other problem
is available only as a library function. You call these functions with values
you have already parsed, and they return Python values rather than judge-formatted text.