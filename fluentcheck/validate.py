'''
Validate a data file against a rule set.

Usage:
  python -m fluentcheck.validate --rules rules.json --data users.csv
  python -m fluentcheck.validate --rules rules.json --data user.json --verbose

JSON data may hold a single object or a list of objects. CSV files are read
with pandas; empty cells become None. Exits with status 1 if any record fails.
'''

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

import pandas as pd

from fluentcheck.rules import RuleSet
from fluentcheck.rules import validate_record
from fluentcheck.runner import ValidationRunner

logger = logging.getLogger(__name__)


def load_records(path: Path) -> list[dict[str, Any]]:
  '''
  Load records from a JSON or CSV file.

  Raises:
    FileNotFoundError: If path does not exist
    ValueError: If the JSON document is not an object or a list of objects
  '''
  if not path.exists():
    raise FileNotFoundError(f'Data file not found: {path}')

  if path.suffix.lower() == '.csv':
    df = pd.read_csv(path)
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient='records')

  data = json.loads(path.read_text())
  if isinstance(data, dict):
    return [data]
  if isinstance(data, list) and all(isinstance(r, dict) for r in data):
    return data
  raise ValueError(f'{path}: expected a JSON object or a list of objects')


def build_runner(name: str, records: Sequence[dict[str, Any]],
                 rule_set: RuleSet) -> ValidationRunner:
  '''Register one check per record.'''
  runner = ValidationRunner(name)
  for i, record in enumerate(records):
    runner.add_check(f'record[{i}]', validate_record, record, rule_set)
  return runner


def main(argv: Optional[Sequence[str]] = None) -> int:
  '''CLI entrypoint. Returns the process exit status.'''
  parser = argparse.ArgumentParser(
      description='Validate records against a rule set')
  parser.add_argument('--rules',
                      type=Path,
                      required=True,
                      help='Path to rule set JSON')
  parser.add_argument('--data',
                      type=Path,
                      required=True,
                      help='Path to JSON or CSV data file')
  parser.add_argument('--verbose',
                      action='store_true',
                      help='Print details for passing records too')
  parser.add_argument('--log',
                      action='store_true',
                      help='Report through logging instead of stdout')
  args = parser.parse_args(argv)

  rule_set = RuleSet.from_file(args.rules)
  records = load_records(args.data)
  logger.info('Validating %d records from %s with %d rules', len(records),
              args.data, len(rule_set.rules))

  runner = build_runner(args.data.name, records, rule_set)
  ok = runner.run()
  if args.log:
    runner.log_summary()
  else:
    runner.print_summary(verbose=args.verbose)
  return 0 if ok else 1


if __name__ == '__main__':
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  raise SystemExit(main())
