# prompt_relay/llm/prompts/templates.py

# Separators between the caller's system prompt and their content.
# Clients depend on these byte for byte; do not reformat.
USER_PROMPT_SEPARATOR = "\n\nUser Prompt: "
TEXT_TO_REVISE_SEPARATOR = "\n\nText to revise:\n"

JSON_MIME_TYPE = "application/json"
