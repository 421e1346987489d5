"""Calculator Agent (tools)

An agent with one tool. The model decides when to call ``calculator`` and
with which arguments; the pydantic schema tells it what the tool accepts.

Demonstrates: build_calculator_agent(), tool calls, message history
"""

from dotenv import load_dotenv

from ghmodels.agents import ask, build_calculator_agent, last_reply
from ghmodels.formatting import print_history

load_dotenv()

EXAMPLES = [
    ("Addition", "What is the sum of 15 and 27?"),
    ("Multiplication", "How much is 8 times 12?"),
    ("Division", "Divide 100 by 4, please."),
    ("Subtraction", "What is the difference between 50 and 19?"),
    ("Multiple operations", "Compute (15 + 5) and then multiply by 3"),
]


def main() -> None:
    print("Module 2: Calculator Agent with tools")
    print("-" * 60)

    agent = build_calculator_agent()

    result = None
    for i, (title, question) in enumerate(EXAMPLES, start=1):
        print(f"\n-- Example {i}: {title} --")
        result = ask(agent, question)
        print(f"Answer...: {last_reply(result)}")

    # The last run used the tool more than once
    print("\nAnalysis:")
    print_history(result["messages"])


if __name__ == "__main__":
    main()
