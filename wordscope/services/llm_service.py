import anthropic
import openai

from wordscope.config import settings


async def _call_anthropic(prompt: str) -> str:
    client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)
    message = await client.messages.create(
        model=settings.llm_model,
        max_tokens=settings.llm_max_tokens,
        messages=[{"role": "user", "content": prompt}],
    )
    return message.content[0].text


async def _call_openai(prompt: str) -> str:
    client = openai.AsyncOpenAI(api_key=settings.openai_api_key)
    response = await client.chat.completions.create(
        model=settings.llm_model,
        max_tokens=settings.llm_max_tokens,
        messages=[{"role": "user", "content": prompt}],
    )
    return response.choices[0].message.content or ""


async def _call_llm(prompt: str) -> str:
    if settings.llm_provider == "anthropic":
        return await _call_anthropic(prompt)
    else:
        return await _call_openai(prompt)


def build_dictionary_prompt(word: str, language: str) -> str:
    return (
        f'Provide a detailed dictionary entry for the word or phrase: "{word}"\n\n'
        "Include the following sections, each starting with its bolded label "
        "exactly as shown:\n"
        "**Pronunciation:** phonetic spelling or IPA, e.g. /prəˌnʌnsiˈeɪʃən/\n"
        "**Definitions:** all common meanings, one per line\n"
        "**Synonyms:** comma-separated synonyms\n"
        "**Antonyms:** comma-separated antonyms\n"
        "**Etymology:** a short origin of the word\n"
        "**Example Sentences:** a few example sentences, one per line\n"
        f"**{language} Meaning:** the meaning of the word in {language}\n"
    )


async def fetch_dictionary_text(word: str, language: str) -> str:
    """Ask the text provider for a free-text dictionary entry."""
    return await _call_llm(build_dictionary_prompt(word, language))
