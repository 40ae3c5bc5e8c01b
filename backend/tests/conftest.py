"""Pytest fixtures for backend tests."""

import os

import pytest
import pytest_asyncio

# Keep the rate limiter out of API tests; must be set before app imports
os.environ["BOTADMIN_RATE_LIMIT_ENABLED"] = "false"

# Import persistence fixtures so pytest recognizes them
from tests.conftest_persistence import test_db

# Re-export so pytest can find them
__all__ = ["test_db"]


# Trimmed copy of a real bot commands.js
SAMPLE_COMMANDS_SOURCE = """\
import "dotenv/config";
import { getRPSChoices } from "./game.js";
import { capitalize, InstallGlobalCommands } from "./utils.js";

// Get the game choices from game.js
function createCommandChoices() {
  const choices = getRPSChoices();
  const commandChoices = [];

  for (let choice of choices) {
    commandChoices.push({
      name: capitalize(choice),
      value: choice.toLowerCase(),
    });
  }

  return commandChoices;
}

// Simple test command
const TEST_COMMAND = {
  name: "test",
  description: "Basic command",
  type: 1,
  integration_types: [0, 1],
  contexts: [0, 1, 2],
};

// Command containing options
// const CHALLENGE_COMMAND = {
//   name: "challenge",
//   description: "Challenge to a match of rock paper scissors",
//   options: [
//     {
//       type: 3,
//       name: "object",
//       description: "Pick your object",
//       required: true,
//       choices: createCommandChoices(),
//     },
//   ],
//   type: 1,
//   integration_types: [0, 1],
//   contexts: [0, 2],
// };

// Explain command
const EXPLAIN_COMMAND = {
  name: "explain",
  description: "Explains concepts",
  type: 1,
  integration_types: [0, 1],
  options: [
    {
      type: 3,
      name: "topic",
      description: "The topic you want explained",
      required: true,
    }
  ],
  contexts: [0, 1, 2],
};

const RPS_COMMAND = {
  name: "rps",
  description: "Play rock paper scissors",
  type: 1,
  contexts: [0, 1, 2],
};

// Chuck Norris joke command
const CHUCK_NORRIS_COMMAND = {
  name: 'chucknorris',
  description: 'Get a random Chuck Norris joke',
  type: 1,
  integration_types: [0, 1],
  contexts: [0, 1, 2],
};

const ALL_COMMANDS = [
  TEST_COMMAND,
  // CHALLENGE_COMMAND,
  EXPLAIN_COMMAND,
  // RPS_COMMAND,
  CHUCK_NORRIS_COMMAND];

InstallGlobalCommands(process.env.APP_ID, ALL_COMMANDS);
"""


@pytest.fixture
def commands_source() -> str:
    """Source text of a bot commands module."""
    return SAMPLE_COMMANDS_SOURCE


@pytest.fixture
def commands_file(tmp_path, monkeypatch, commands_source):
    """Write the sample source to disk and point settings at it."""
    from botadmin.config import settings

    path = tmp_path / "commands.js"
    path.write_text(commands_source, encoding="utf-8")
    monkeypatch.setattr(settings, "commands_file", path)
    return path


@pytest_asyncio.fixture
async def client(test_db):
    """HTTP client bound to the app with a fresh database."""
    from httpx import ASGITransport, AsyncClient

    from botadmin.main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
