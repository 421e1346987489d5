"""Hello Agent (no tools)

The smallest possible agent: a tuned GitHub Models chat model and a system
prompt. Each invoke() is independent -- the agent has no memory, so the last
part passes the earlier message along to show how context works.

Demonstrates: build_hello_agent(), ask(), last_reply(), message metadata
"""

from dotenv import load_dotenv

from ghmodels.agents import ask, build_hello_agent, last_reply

load_dotenv()


def main() -> None:
    print("Module 1: Hello Agent")
    print("-" * 60)

    agent = build_hello_agent()

    # Three independent questions
    for question in (
        "What is the capital of Japan?",
        "Give me 3 fun facts about Tokyo",
        "My name is Glaucia",
    ):
        result = ask(agent, question)
        print(f"Answer...: {last_reply(result)}")

    # No automatic memory: resend the earlier message to give context
    result = ask(agent, "My name is Glaucia", "What is my name?")
    print(f"Answer...: {last_reply(result)}")

    messages = result["messages"]
    print("Info:")
    print(f"Total messages...: {len(messages)}")
    print(f"Type of last message...: {type(messages[-1]).__name__}")
    print(f"Content type...: {type(messages[-1].content).__name__}")


if __name__ == "__main__":
    main()
