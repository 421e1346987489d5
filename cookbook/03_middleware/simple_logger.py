"""Simple Logger Middleware

Attaches ConsoleLoggerMiddleware to a calculator agent so every model call
and tool call is printed as it happens:

  [BEFORE MODEL]  message count and the last message
  [AFTER MODEL]   whether the model asked for tools
  [TOOL CALL]     tool name, arguments and result

Demonstrates: build_middleware_agent(), before_model / after_model /
              wrap_tool_call hooks
"""

from dotenv import load_dotenv

from ghmodels.agents import ask, build_middleware_agent, last_reply

load_dotenv()

TESTS = [
    ("Sum", "What is 15 + 27?"),
    ("Question without math", "Hi, how are you?"),
    ("Multiple operations", "Compute 10 * 5 and then divide by 2"),
]


def main() -> None:
    print("Module 3: Simple Middleware")
    print("The 3 main hooks\n")
    print("=" * 60)

    agent = build_middleware_agent()

    for i, (title, question) in enumerate(TESTS, start=1):
        if i > 1:
            print("\n\n" + "=" * 60)
        print(f"\nTEST {i}: {title}")
        print(f'Question: "{question}"\n')
        result = ask(agent, question)
        print(f"\nFinal answer: {last_reply(result)}")


if __name__ == "__main__":
    main()
