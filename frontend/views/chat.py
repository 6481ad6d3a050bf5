"""
AI chat assistant.

Replies come from the backend chat route; when that is unreachable the
provider is called directly, and when that fails too the reply is a fixed
apology. Every user message gets exactly one model message back.
"""
import logging
import uuid
from dataclasses import replace

from shared.gemini import ProviderError, generate_content, generate_response, language_name
from frontend import config
from frontend.entities import ChatMessage
from frontend.errors import RecolheError
from frontend.translations import strings

logger = logging.getLogger(__name__)

WELCOME_ID = 'welcome'


def client_instruction(language):
    lang_name = language_name(language)
    return f"""
You are the Recolhe+ Assistant, a helpful and friendly AI for a waste collection and recycling platform.
Your goal is to help users identify recyclable materials, schedule pickups, and understand their environmental impact.
You must respond in {lang_name}.
Keep responses concise, encouraging, and formatted nicely.
If a user asks about EcoCoins, explain that they earn 10 coins per kg of recycled material.
"""


def _message_id():
    return uuid.uuid4().hex


class ChatAssistant:
    def __init__(self, api, language='en', api_key=None):
        self.api = api
        self.language = language
        self.api_key = config.API_KEY if api_key is None else api_key
        self.messages = [self._welcome()]
        self.loading = False

    def _welcome(self):
        return ChatMessage(id=WELCOME_ID, role='model', text=strings(self.language)['assistant']['initialMsg'])

    def set_language(self, language):
        self.language = language
        # Only an untouched conversation is re-localized
        if len(self.messages) == 1 and self.messages[0].id == WELCOME_ID:
            self.messages = [self._welcome()]

    def history(self):
        return [{'role': m.role, 'text': m.text} for m in self.messages if not m.is_typing]

    def generate_reply(self, history, message):
        try:
            return self.api.send_chat(history, message, self.language)
        except RecolheError as e:
            logger.warning(f"Backend chat API unreachable, calling the provider directly: {e}")

        t = strings(self.language)['assistant']
        try:
            text = generate_response(
                history, message, self.language,
                system_instruction=client_instruction(self.language),
                api_key=self.api_key,
            )
            return text or t['empty']
        except ProviderError as e:
            logger.error(f"Direct provider call failed: {e}")
            return t['error']

    def send(self, text):
        """Append the user message and the model's reply; blank input is ignored."""
        if not text or not text.strip():
            return None

        history = self.history()
        self.messages.append(ChatMessage(id=_message_id(), role='user', text=text))
        thinking = ChatMessage(id=_message_id(), role='model', text='', is_typing=True)
        self.messages.append(thinking)
        self.loading = True
        try:
            reply = self.generate_reply(history, text)
        finally:
            self.loading = False
            self.messages.remove(thinking)

        message = replace(thinking, text=reply, is_typing=False)
        self.messages.append(message)
        return message


def analyze_waste(description, api_key=None):
    """Ask the provider to categorize a free-text waste description."""
    prompt = (
        f'Analyze this waste description: "{description}". Categorize it '
        '(Plastic, Glass, Paper, Metal, Organic, E-waste) and estimate a rough weight if possible. '
        'Return a short JSON summary.'
    )
    try:
        text = generate_content(
            [{'role': 'user', 'parts': [{'text': prompt}]}],
            api_key=config.API_KEY if api_key is None else api_key,
        )
        return text or 'Could not analyze.'
    except ProviderError:
        return 'Analysis failed.'
