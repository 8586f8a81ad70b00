import os
from typing import Any

import requests

TRANSRELAY_URL = os.getenv("TRANSRELAY_URL", "http://127.0.0.1:8000")
HEADERS = {"Content-Type": "application/json"}


def translate(source_lang: str, target_lang: str, text_list: list[str]) -> dict[str, Any]:
    response = requests.post(
        f"{TRANSRELAY_URL}/",
        json={"source_lang": source_lang, "target_lang": target_lang, "text_list": text_list},
        headers=HEADERS,
        timeout=30,
    )
    response.raise_for_status()
    return response.json()


def main() -> None:
    texts = ["Hello, how are you?", "What is your name?"]
    print(f"Translating {len(texts)} texts via {TRANSRELAY_URL}...")
    body = translate("en", "zh", texts)
    for item in body["data"]:
        print(f"{item['original']} -> {item['result']}")
    print(body["message"])


if __name__ == "__main__":
    main()
