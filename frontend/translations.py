# UI strings emitted by the application layer, keyed by language code.

translations = {
    'en': {
        'common': {'back': 'Back', 'loading': 'Loading...'},
        'nav': {
            'dashboard': 'Dashboard',
            'pickup': 'Schedule Pickup',
            'smartBin': 'Smart Bin',
            'liveMap': 'Live Map',
            'routeMap': 'Route Map',
            'rewards': 'Rewards',
            'assistant': 'AI Assistant',
            'history': 'History',
        },
        'auth': {
            'passMismatch': 'Passwords do not match',
            'passRequired': 'Password is required',
            'accountCreated': 'Account created successfully!',
            'demoMode': 'Demo Mode',
        },
        'dashboard': {
            'balance': 'EcoCoins Balance',
            'earnings': 'Earnings',
            'thisWeek': 'this week',
            'startEarning': 'Recycle to start earning',
            'totalRecycled': 'Total Recycled',
            'totalCollected': 'Total Collected',
            'savedTrees': 'Saved ~{n} trees',
            'noImpact': 'No impact yet',
            'nextPickup': 'Next Pickup',
            'activeRoute': 'Active Route',
        },
        'pickup': {
            'success': 'Pickup scheduled successfully!',
            'offline': 'Offline Mode',
            'alertItem': 'Please select at least one item',
            'alertDate': 'Please choose a date and time',
        },
        'rewards': {
            'airtime': 'Airtime',
            'mobileMoney': 'Mobile Money',
            'giftCard': 'Gift Card',
            'insufficient': 'Insufficient EcoCoins',
            'invalidAmount': 'Choose an amount to redeem',
            'successDesc': '{n} EcoCoins have been deducted from your balance.',
        },
        'assistant': {
            'initialMsg': "Hello! I'm your Recolhe+ assistant. Ask me anything about recycling, pickups or EcoCoins.",
            'error': "I'm having trouble connecting to the recycling knowledge base right now. Please try again later.",
            'empty': "I'm sorry, I couldn't generate a response at this time.",
        },
        'history': {'header': 'Transaction History', 'empty': 'No transactions yet'},
        'smartBin': {'deviceRequired': 'Enter the device ID printed on your bin', 'paid': 'Payment processed successfully!'},
        'map': {'you': 'You are here'},
        'offline': 'Offline Mode: Backend unreachable. Using mock data.',
    },
    'fr': {
        'common': {'back': 'Retour', 'loading': 'Chargement...'},
        'nav': {
            'dashboard': 'Tableau de bord',
            'pickup': 'Planifier une collecte',
            'smartBin': 'Poubelle connectée',
            'liveMap': 'Carte en direct',
            'routeMap': 'Carte des tournées',
            'rewards': 'Récompenses',
            'assistant': 'Assistant IA',
            'history': 'Historique',
        },
        'auth': {
            'passMismatch': 'Les mots de passe ne correspondent pas',
            'passRequired': 'Le mot de passe est requis',
            'accountCreated': 'Compte créé avec succès !',
            'demoMode': 'Mode démo',
        },
        'dashboard': {
            'balance': 'Solde EcoCoins',
            'earnings': 'Gains',
            'thisWeek': 'cette semaine',
            'startEarning': 'Recyclez pour commencer à gagner',
            'totalRecycled': 'Total recyclé',
            'totalCollected': 'Total collecté',
            'savedTrees': '~{n} arbres sauvés',
            'noImpact': "Pas encore d'impact",
            'nextPickup': 'Prochaine collecte',
            'activeRoute': 'Tournée active',
        },
        'pickup': {
            'success': 'Collecte planifiée avec succès !',
            'offline': 'Mode hors ligne',
            'alertItem': 'Veuillez sélectionner au moins un article',
            'alertDate': 'Veuillez choisir une date et une heure',
        },
        'rewards': {
            'airtime': "Crédit d'appel",
            'mobileMoney': 'Mobile Money',
            'giftCard': 'Carte cadeau',
            'insufficient': 'EcoCoins insuffisants',
            'invalidAmount': 'Choisissez un montant à échanger',
            'successDesc': '{n} EcoCoins ont été déduits de votre solde.',
        },
        'assistant': {
            'initialMsg': "Bonjour ! Je suis votre assistant Recolhe+. Posez-moi vos questions sur le recyclage, les collectes ou les EcoCoins.",
            'error': "J'ai du mal à me connecter à la base de connaissances pour le moment. Veuillez réessayer plus tard.",
            'empty': "Désolé, je n'ai pas pu générer de réponse pour le moment.",
        },
        'history': {'header': 'Historique des transactions', 'empty': 'Aucune transaction pour le moment'},
        'smartBin': {'deviceRequired': "Saisissez l'identifiant inscrit sur votre poubelle", 'paid': 'Paiement effectué avec succès !'},
        'map': {'you': 'Vous êtes ici'},
        'offline': 'Mode hors ligne : serveur injoignable. Données fictives utilisées.',
    },
    'pt': {
        'common': {'back': 'Voltar', 'loading': 'A carregar...'},
        'nav': {
            'dashboard': 'Painel',
            'pickup': 'Agendar Recolha',
            'smartBin': 'Contentor Inteligente',
            'liveMap': 'Mapa ao Vivo',
            'routeMap': 'Mapa de Rotas',
            'rewards': 'Recompensas',
            'assistant': 'Assistente IA',
            'history': 'Histórico',
        },
        'auth': {
            'passMismatch': 'As palavras-passe não coincidem',
            'passRequired': 'A palavra-passe é obrigatória',
            'accountCreated': 'Conta criada com sucesso!',
            'demoMode': 'Modo Demo',
        },
        'dashboard': {
            'balance': 'Saldo EcoCoins',
            'earnings': 'Ganhos',
            'thisWeek': 'esta semana',
            'startEarning': 'Recicle para começar a ganhar',
            'totalRecycled': 'Total Reciclado',
            'totalCollected': 'Total Recolhido',
            'savedTrees': '~{n} árvores salvas',
            'noImpact': 'Ainda sem impacto',
            'nextPickup': 'Próxima Recolha',
            'activeRoute': 'Rota Ativa',
        },
        'pickup': {
            'success': 'Recolha agendada com sucesso!',
            'offline': 'Modo Offline',
            'alertItem': 'Selecione pelo menos um item',
            'alertDate': 'Escolha uma data e hora',
        },
        'rewards': {
            'airtime': 'Saldo',
            'mobileMoney': 'Dinheiro Móvel',
            'giftCard': 'Vale de Compras',
            'insufficient': 'EcoCoins insuficientes',
            'invalidAmount': 'Escolha um montante a resgatar',
            'successDesc': '{n} EcoCoins foram descontados do seu saldo.',
        },
        'assistant': {
            'initialMsg': 'Olá! Sou o assistente Recolhe+. Pergunte-me sobre reciclagem, recolhas ou EcoCoins.',
            'error': 'Estou com dificuldades em ligar à base de conhecimento. Tente novamente mais tarde.',
            'empty': 'Desculpe, não consegui gerar uma resposta neste momento.',
        },
        'history': {'header': 'Histórico de Transações', 'empty': 'Ainda sem transações'},
        'smartBin': {'deviceRequired': 'Introduza o ID impresso no seu contentor', 'paid': 'Pagamento processado com sucesso!'},
        'map': {'you': 'Está aqui'},
        'offline': 'Modo Offline: servidor indisponível. A usar dados de demonstração.',
    },
}


def strings(language):
    """Strings for a language, English when the code is unknown."""
    return translations.get(language, translations['en'])
