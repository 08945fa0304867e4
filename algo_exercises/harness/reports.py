"""Aggregates per-case harness results into pass/fail reports."""

import json
import os

from algo_exercises.harness import suite_runner


class PassFailAggregator:
    """Counts passed and failed test cases, optionally per group."""

    def __init__(self, group_by=None, passed_column=suite_runner.PASSED_COLUMN):
        """
        Initializes a PassFailAggregator.

        Args:
            group_by (str, optional): The column to group by before counting, e.g. "exercise". Defaults to None.
            passed_column (str, optional): The boolean column telling whether a case passed.
        """
        self.group_by = group_by
        self.passed_column = passed_column
        self.aggregated_result = None

    def aggregate(self, data):
        """
        Aggregates the provided data.

        Args:
            data (pd.DataFrame): The per-case results to aggregate.
        """
        self._validate_data(data)
        if self.group_by:
            self._aggregate_grouped(data)
        else:
            self._aggregate(data)

    def _validate_data(self, data):
        """
        Ensures that the input data has the columns needed for counting.

        Args:
            data (pd.DataFrame): The input data to validate.

        Raises:
            ValueError: If a required column is missing.
        """
        required = [self.passed_column] + ([self.group_by] if self.group_by else [])
        missing = [col for col in required if col not in data.columns]
        if missing:
            raise ValueError(f"Data does not have the column(s): {', '.join(missing)}.")

    @staticmethod
    def _counts(passed):
        total = int(len(passed))
        num_passed = int(passed.astype(bool).sum())
        return {"total": total, "passed": num_passed, "failed": total - num_passed}

    def _aggregate(self, data):
        """
        Counts cases over the whole data.

        Args:
            data (pd.DataFrame): The input data to aggregate.
        """
        self.aggregated_result = self._counts(data[self.passed_column])

    def _aggregate_grouped(self, data):
        """
        Counts cases in each group, keeping the order in which groups first appear.

        Args:
            data (pd.DataFrame): The input data to aggregate.
        """
        gb = data.groupby(self.group_by, sort=False)
        self.aggregated_result = {str(name): self._counts(group[self.passed_column]) for name, group in gb}


def failing_cases(results):
    """
    Returns the rows of the failing test cases.

    Args:
        results (pd.DataFrame): The per-case results returned by run_suites.

    Returns:
        pd.DataFrame: The failing rows with their input, expected and actual values.
    """
    columns = [
        suite_runner.EXERCISE_COLUMN,
        suite_runner.CASE_INDEX_COLUMN,
        suite_runner.INPUTS_COLUMN,
        suite_runner.EXPECTED_COLUMN,
        suite_runner.ACTUAL_COLUMN,
        suite_runner.FAILURE_KIND_COLUMN,
        suite_runner.ERROR_MESSAGE_COLUMN,
    ]
    failed = results[~results[suite_runner.PASSED_COLUMN].astype(bool)]
    return failed[columns].reset_index(drop=True)


def summarize(results):
    """
    Summarizes a harness run.

    Args:
        results (pd.DataFrame): The per-case results returned by run_suites.

    Returns:
        dict: "totals" with overall counts, "exercises" with counts per exercise, and "failures" with one
            record per failing case.
    """
    overall = PassFailAggregator()
    overall.aggregate(results)
    per_exercise = PassFailAggregator(group_by=suite_runner.EXERCISE_COLUMN)
    per_exercise.aggregate(results)
    return {
        "totals": overall.aggregated_result,
        "exercises": per_exercise.aggregated_result,
        "failures": failing_cases(results).to_dict(orient="records"),
    }


def format_summary(summary):
    """
    Formats a summary as the text printed by the command line.

    Args:
        summary (dict): A summary returned by summarize.

    Returns:
        str: One line per exercise, the failing case details, and a final totals line.
    """
    lines = []
    for name, counts in summary["exercises"].items():
        status = "PASS" if counts["failed"] == 0 else "FAIL"
        lines.append(f"{status}  {name}: {counts['passed']}/{counts['total']} passed")

    if summary["failures"]:
        lines.append("")
        lines.append("Failures:")
        for failure in summary["failures"]:
            lines.append(
                f"  {failure['exercise']}[{failure['case_index']}] input=({failure['inputs']}) "
                f"expected={failure['expected']} actual={failure['actual'] or '-'}"
            )
            lines.append(f"      {failure['failure_kind']}: {failure['error_message']}")

    totals = summary["totals"]
    lines.append("")
    lines.append(f"{totals['passed']} passed, {totals['failed']} failed, {totals['total']} total")
    return "\n".join(lines)


def write_report(results, output_dir):
    """
    Writes the per-case results as JSONL and the summary as JSON.

    Args:
        results (pd.DataFrame): The per-case results returned by run_suites.
        output_dir (str): The directory to write to. Created if missing.

    Returns:
        tuple: The paths of the JSONL results file and of the JSON summary file.
    """
    os.makedirs(output_dir, exist_ok=True)
    results_file = os.path.join(output_dir, "case_results.jsonl")
    results.to_json(results_file, orient="records", lines=True)

    summary_file = os.path.join(output_dir, "summary.json")
    with open(summary_file, "w") as f:
        json.dump(summarize(results), f, indent=2, default=str)
    return results_file, summary_file
