# hrcli

A small command-line tool for keeping records of people. Each person is stored as a JSON file. Records can be listed, removed, or searched by name pattern, description pattern, labels and minimum metric values.

## Installation

```
pip install .
```

This installs the `hr` command.

## Storage

Records live in `~/.hr_data` by default. To use another directory, set `HR_STORAGE_PATH`:

```
export HR_STORAGE_PATH=/tmp/hr-data
```

The directory is created if it does not exist. Each person is saved as `<name>.json`. Saving a person whose name is already stored replaces the old record.

## Usage

### Add a person

`--name` (or `-n`) is required. `--id`, `--phone` and `--description` (or `-d`) are optional. `--label` and `--metric` are optional and can be repeated:

```
hr add --name alice --id 123 --description "team lead" \
       --label eng --label oncall --metric speed:10 --metric height:20
```

A metric is written as `name:value`, where the value is a whole number from 0 to 255. Any other form is rejected with an error.

Prints `Adding <name>`.

### List everyone

```
hr list
```

Each stored person is printed as `Found human: <name>`, in order of file name.

### Remove a person

```
hr remove alice
```

Prints `Removing <name>`. Removing a name that is not stored prints an error and the command exits with status 1.

### Search

`search` takes the same options as `add`, and `--name` is required here too. The name and description are wildcard patterns matched against the whole value: `*` matches any run of characters and `?` matches exactly one character. A person with no description never matches a description pattern. Every `--label` given must be present on the person. Every `--metric name:value` given must be present and at least that value. `--id` and `--phone` are accepted but not used for matching.

```
hr search --name "ali*" --label eng --metric speed:10
hr search --name "*" --description "*lead"
```

Each match is printed as `Found human: <name>`. If the records cannot be read, `Search failed: <reason>` is written to standard error.

## Using it from Python

```python
from hrcli.models import Human, parse_metric
from hrcli.storage import Storage
from hrcli.search import search

storage = Storage("/tmp/hr-data")
storage.save(Human(name="alice", label=["eng"], metric=[parse_metric("speed:10")]))

query = Human(name="ali*", label=["eng"], metric=[parse_metric("speed:10")])
print([h.name for h in search(storage, query)])
```

- `hrcli.models` holds the `Human` and `Metric` dataclasses, `parse_metric` for `name:value` strings, `Human.to_dict` and `human_from_dict` for the JSON form.
- `hrcli.storage.Storage` has `save`, `load`, `load_all` and `remove`. `load` and `remove` raise `FileNotFoundError` for an unknown name.
- `hrcli.search` has `search` and the filters it is built from: `wildcard_matches`, `labels_match`, `metrics_meet`, `description_matches`, `human_matches`, `normalize_pattern` and `extract_min_metrics`.
- `hrcli.cli` has `build_parser`, `parse_args`, `default_storage_path`, `run` and `main`.

## What it does not do

There is no command to edit part of a record. To change a person, add them again under the same name. There is no search by id or phone.

## Running the tests

```
pip install ".[test]"
pytest
```