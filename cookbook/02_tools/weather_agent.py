"""Weather Agent (several tools)

Three tools the model can chain: look up the weather, then suggest clothing
for the temperature and an activity for the condition. The weather data is a
small mock table (São Paulo, Curitiba, Rio de Janeiro, Porto Alegre).

Demonstrates: build_weather_agent(), multi-tool runs, print_flow()
"""

from dotenv import load_dotenv

from ghmodels.agents import ask, build_weather_agent, last_reply
from ghmodels.formatting import print_flow

load_dotenv()

TESTS = [
    ("Weather for a city", "What's the weather in São Paulo today?"),
    ("Weather and clothing", "What should I wear in Curitiba today?"),
    (
        "Weather, activity and clothing",
        "What can I do today in Rio de Janeiro and what should I wear?",
    ),
]


def main() -> None:
    print("Module 2: Weather Agent with tools")
    print("-" * 60)

    agent = build_weather_agent()

    result = None
    for i, (title, question) in enumerate(TESTS, start=1):
        print(f"\nTest {i}: {title}")
        result = ask(agent, question)
        print(f"\nAnswer...: {last_reply(result)}")

    print(f"\n\nFlow analysis (Test {len(TESTS)}):")
    print_flow(result["messages"])


if __name__ == "__main__":
    main()
