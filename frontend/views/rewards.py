from frontend import config
from frontend.errors import InsufficientBalance, ValidationFailed
from frontend.state import cost_in_coins
from frontend.translations import strings

TABS = ('airtime', 'cash', 'voucher')
AMOUNTS = (200, 500, 1000, 2000, 5000, 10000)  # XOF
PROVIDERS = ('Orange', 'Telecel')


def buying_power(balance):
    """What a coin balance is worth in XOF."""
    return balance * config.EXCHANGE_RATE


class RewardsForm:
    def __init__(self, shell):
        self.shell = shell
        self.tab = 'airtime'
        self.amount = 500
        self.provider = 'Orange'
        self.phone_number = ''

    @property
    def t(self):
        return strings(self.shell.state.language)['rewards']

    @property
    def balance(self):
        return self.shell.state.user.eco_coins

    @property
    def cost(self):
        return cost_in_coins(self.amount)

    @property
    def can_afford(self):
        return self.balance >= self.cost

    def description(self):
        if self.tab == 'airtime':
            return f"{self.t['airtime']} ({self.amount} XOF) - {self.provider}"
        if self.tab == 'cash':
            return f"{self.t['mobileMoney']} ({self.amount} XOF) - {self.provider}"
        return f"{self.t['giftCard']} ({self.amount} XOF)"

    def select_tab(self, tab):
        if tab not in TABS:
            raise ValidationFailed(f'Unknown reward type: {tab}')
        self.tab = tab

    def submit(self):
        """Redeem the selected reward; returns the confirmation line."""
        if self.amount <= 0:
            raise ValidationFailed(self.t['invalidAmount'])
        if not self.can_afford:
            raise InsufficientBalance(self.t['insufficient'])
        transaction = self.shell.redeem(self.amount, self.description())
        return self.t['successDesc'].replace('{n}', str(transaction.amount))
