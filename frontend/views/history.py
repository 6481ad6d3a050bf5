from frontend.translations import strings


def history_rows(state):
    """(description, date, signed amount) per transaction, newest first."""
    return [
        (tx.description, tx.date[:10], f"{'+' if tx.type == 'earned' else '-'}{tx.amount}")
        for tx in state.transactions
    ]


def empty_message(state):
    return strings(state.language)['history']['empty']
