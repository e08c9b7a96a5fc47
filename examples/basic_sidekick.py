"""Call the sidekick's tools directly against a running LM Studio, without an MCP client."""

import asyncio
import logging

from lm_sidekick import LMStudioLLM, Settings, ToolDispatcher

logging.basicConfig(level=logging.INFO)


async def main():
    settings = Settings.from_env()

    async with LMStudioLLM.from_settings(settings) as llm:
        dispatcher = ToolDispatcher(llm)

        health = await dispatcher.dispatch("health_check")
        print(f"🩺 {health.joined_text}")

        summary = await dispatcher.dispatch("automate_menial_task", {
            "task_type": "summarize",
            "input_data": "The quick brown fox jumps over the lazy dog. " * 5,
        })
        print(f"📝 Summary: {summary.joined_text}")

        report = await dispatcher.dispatch("batch_process", {
            "items": ["apple", "carrot", "salmon", "rice"],
            "operation": "classify as fruit, vegetable, protein or grain",
            "batch_size": 2,
        })
        print(f"📦 Batch report:\n{report.joined_text}")


if __name__ == "__main__":
    asyncio.run(main())
