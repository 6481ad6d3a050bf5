"""Thin wrapper around the Gemini generateContent REST endpoint."""
import logging
import os

import requests

logger = logging.getLogger(__name__)

GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

API_KEY = os.environ.get('API_KEY', '')
GEMINI_MODEL = os.environ.get('GEMINI_MODEL', 'gemini-2.5-flash')
GEMINI_TIMEOUT = 30


class ProviderError(Exception):
    pass


def language_name(language, regional=False):
    if language == 'pt':
        return 'Portuguese (Guinea-Bissau context)' if regional else 'Portuguese'
    if language == 'fr':
        return 'French'
    return 'English'


def server_instruction(language):
    lang_name = language_name(language, regional=True)
    return f"""
You are the Recolhe+ Assistant, powered by Renoverde, for a smart waste collection platform in Guinea-Bissau.
Your goal is to help users recycle, schedule pickups, and understand their impact.
User location: Bissau. Currency: XOF (CFA Franc).
EcoCoin Rate: 1 Coin = 10 XOF.

Current Language: {lang_name}.
Always respond in {lang_name}.
Keep responses concise and friendly.
"""


def to_contents(history, message):
    """Map {role, text} chat history onto Gemini content parts."""
    contents = [
        {'role': msg.get('role', 'user'), 'parts': [{'text': msg.get('text', '')}]}
        for msg in history
    ]
    contents.append({'role': 'user', 'parts': [{'text': message}]})
    return contents


def generate_content(contents, system_instruction=None, api_key=None, model=None):
    api_key = api_key if api_key is not None else API_KEY
    if not api_key:
        raise ProviderError('AI provider key is not configured')

    payload = {'contents': contents}
    if system_instruction:
        payload['system_instruction'] = {'parts': [{'text': system_instruction}]}

    url = GEMINI_API_URL.format(model=model or GEMINI_MODEL)
    try:
        r = requests.post(url, params={'key': api_key}, json=payload, timeout=GEMINI_TIMEOUT)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Gemini request failed: {e}")
        raise ProviderError(str(e)) from e

    try:
        return data['candidates'][0]['content']['parts'][0]['text']
    except (KeyError, IndexError, TypeError) as e:
        raise ProviderError('Malformed provider response') from e


def generate_response(history, message, language='en', system_instruction=None, api_key=None):
    if system_instruction is None:
        system_instruction = server_instruction(language)
    return generate_content(
        to_contents(history or [], message),
        system_instruction=system_instruction,
        api_key=api_key,
    )
