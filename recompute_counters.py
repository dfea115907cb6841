"""Script to rebuild computed answer/like counters from the source collections."""
import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from forum.logging_logs.log_config import setup_logging
from forum.discussions.services.maintenance.counter_service import CounterService

def main():
    setup_logging()

    print("Recomputing counters...")
    report = CounterService().recompute_counters()

    if report["questions"] or report["answers"]:
        print(f"\nCorrected {len(report['questions'])} questions:")
        for question_id in report["questions"]:
            print(f"  - {question_id}")
        print(f"\nCorrected {len(report['answers'])} answers:")
        for answer_id in report["answers"]:
            print(f"  - {answer_id}")
    else:
        print("All counters already match!")

    return report

if __name__ == "__main__":
    main()
