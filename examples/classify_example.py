"""Example demonstrating assessment status classification."""

from passmark import (
    AssessmentProcessor,
    ConfigurationError,
    process_row,
    rows_needing_review,
)
from passmark.runner import BatchRunner


def main():
    print("Classifying single rows\n")

    for row in (
        {"Learner": "Ada", "Grade": "B+"},
        {"Learner": "Bo", "Result": "55%"},
        {"Learner": "Cy", "Notes": "great job"},
    ):
        result = process_row(row)
        warnings = [w.type.value for w in result.warnings]
        print(f"  {row} -> {result.status.value} ({result.confidence.value}) {warnings}")
    print()

    print("Processor that defaults unclear rows to PENDING")
    processor = AssessmentProcessor({"defaultToPassOnMissing": False})
    batch = processor.process_batch(
        [{"Status": "Maybe"}, {"Status": "Completed"}, {"Final Score": 91}]
    )
    print(f"  Summary: {batch.summary.model_dump()}")
    for index, result in rows_needing_review(batch.results):
        print(f"  Row {index} needs review: {result.warning_types}")
    print()

    print("Rejected configuration")
    try:
        AssessmentProcessor({"gradeMapping": {"A": "MAYBE"}})
    except ConfigurationError as e:
        print(f"  {e}\n")

    print("Batch run with report")
    BatchRunner().run(
        [
            {"Pass/Fail": "P"},
            {"Assessment Status": "In Progress"},
            {"Comments": "n/a"},
            {"Exam Result": "Distinction"},
        ]
    )


if __name__ == "__main__":
    main()
