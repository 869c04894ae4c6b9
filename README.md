# drillbook

drillbook is a small library for a course of programming exercises. It
provides coloured status lines, a generator for the `rust-project.json` file
that rust-analyzer reads, and worked solutions to a selection of the
exercises, written as ordinary Python modules.

## Installation

```
pip install .
```

The only runtime dependency is `rich`.

## Status lines: `drillbook.ui`

```python
from drillbook import ui

ui.format_warn("Compiling of intro1 failed!")   # "⚠️  Compiling of intro1 failed!"
ui.format_success("Successfully ran intro1!")   # "✅ Successfully ran intro1!"
ui.warn("Ran intro1 with errors")               # printed in red
ui.success("Successfully tested vecs1!")        # printed in green
```

When the `NO_EMOJI` environment variable is set, the markers become plain
`!` and `✓`.

## rust-analyzer project file: `drillbook.project`

`RustAnalyzerProject` collects one `Crate` entry (edition `2021`, no deps,
cfg `test`) for every `.rs` file it is given.

```python
from drillbook.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()             # RUST_SRC_PATH, or `rustc --print sysroot`
project.exercises_to_json("exercises")  # every .rs file below the directory
project.add_path("extra/lesson.rs")     # a single file; non-.rs paths are ignored
print(project.to_json())                # compact JSON
project.write_to_disk()                 # ./rust-project.json by default
```

`get_sysroot_src` uses `RUST_SRC_PATH` when it is set; otherwise it runs
`rustc --print sysroot`, prints the toolchain it found and points at
`lib/rustlib/src/rust/library` inside it.

## Worked solutions: `drillbook.solutions`

| Module      | What it holds |
|-------------|---------------|
| `quizzes`   | `calculate_price_of_apples`, `transformer` with `Uppercase`/`Trim`/`Append` commands, `ReportCard` |
| `iterators` | `capitalize_first`, `capitalize_words_vector`, `capitalize_words_string`, `divide` and its errors, `result_with_list`, `list_of_results`, `factorial`, `Progress` counting functions |
| `vecs`      | `array_and_vec`, `vec_loop`, `vec_map` |
| `persons`   | `Person.default`, lenient `Person.from_text`, strict `parse_person` with `ParsePersonError` subclasses |
| `colors`    | `Color.from_tuple`, `Color.from_sequence` with `BadLenError` and `IntConversionError` |
| `options`   | `maybe_icecream` |
| `checks`    | `is_even`, `Rectangle` that rejects non-positive sides |
| `errors`    | `generate_nametag_text`, `total_cost`, `PositiveNonzeroInteger`, `parse_pos_nonzero` |
| `hashmaps`  | `fruit_basket`, `Fruit`, `fill_fruit_basket`, `Team`, `build_scores_table` |
| `pointers`  | `Cons` lists, `create_empty_list`, `create_non_empty_list`, `abs_all` |
| `basics`    | `bigger`, `foo_if_fizz`, `animal_habitat`, `sale_price`, `is_a_color_word`, `trim_me`, `compose_me`, `replace_me` |
| `records`   | colour structs, `Order`, `create_order_template`, `Package`, message classes and `State.process` |
| `traits`    | `Wrapper`, `append_bar`, `Licensed`, `SomeSoftware`, `OtherSoftware`, `compare_license_types` |

```python
from drillbook.solutions.quizzes import calculate_price_of_apples
from drillbook.solutions.iterators import factorial

calculate_price_of_apples(41)   # 41
factorial(4)                    # 24
```

## What drillbook does not do

drillbook has no command-line program. It does not read a list of exercises,
does not compile, run, test or lint exercise files, does not tell pending
exercises from finished ones, and has no watch mode, hints or progress
tracking. It only provides the status-line helpers, the project file
generator and the solution modules above.