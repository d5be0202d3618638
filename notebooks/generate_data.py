#!/usr/bin/env python3
"""
Standalone synthetic data generator. Run this to create data/sample_transfers.csv
Usage: python3 generate_data.py
"""
import random
from datetime import datetime, timedelta
from pathlib import Path

import numpy as np
import pandas as pd

random.seed(42)
np.random.seed(42)

OUTPUT_DIR = Path(__file__).parent.parent / 'data'
OUTPUT_DIR.mkdir(exist_ok=True)

# league -> (country, continent, clubs)
LEAGUES = {
    'Premier League': ('England', 'Europe', ['Manchester City', 'Arsenal', 'Chelsea', 'Liverpool', 'Tottenham']),
    'La Liga': ('Spain', 'Europe', ['Real Madrid', 'Barcelona', 'Atletico Madrid', 'Sevilla']),
    'Serie A': ('Italy', 'Europe', ['Inter', 'Juventus', 'AC Milan', 'Napoli']),
    'Bundesliga': ('Germany', 'Europe', ['Bayern Munich', 'Borussia Dortmund', 'RB Leipzig']),
    'Ligue 1': ('France', 'Europe', ['Paris Saint-Germain', 'Marseille', 'Lyon']),
    'Eredivisie': ('Netherlands', 'Europe', ['Ajax', 'PSV', 'Feyenoord']),
    'Brasileirão': ('Brazil', 'South America', ['Flamengo', 'Palmeiras', 'Santos']),
    'Liga Profesional': ('Argentina', 'South America', ['River Plate', 'Boca Juniors']),
    'Saudi Pro League': ('Saudi Arabia', 'Asia', ['Al Hilal', 'Al Nassr']),
    'MLS': ('United States', 'North America', ['Inter Miami', 'LA Galaxy']),
}

# Rough buying power; richer leagues buy more and pay more
SPEND_WEIGHT = {
    'Premier League': 6.0, 'La Liga': 3.0, 'Serie A': 2.5, 'Bundesliga': 2.0,
    'Ligue 1': 2.0, 'Saudi Pro League': 2.0, 'Eredivisie': 0.8, 'MLS': 0.7,
    'Brasileirão': 0.6, 'Liga Profesional': 0.4,
}

TRANSFER_TYPES = ['permanent', 'permanent', 'permanent', 'loan', 'free']
POSITIONS = ['GK', 'DF', 'MF', 'FW']
SEASONS = ['2021/22', '2022/23', '2023/24', '2024/25']

clubs = [
    (club, league, country, continent)
    for league, (country, continent, names) in LEAGUES.items()
    for club in names
]
buy_weights = np.array([SPEND_WEIGHT[league] for _, league, _, _ in clubs])
buy_weights = buy_weights / buy_weights.sum()

transfers = []


def season_window(season):
    start_year = int(season[:4])
    if random.random() < 0.7:
        return 'summer', datetime(start_year, 6, 15) + timedelta(days=random.randint(0, 75))
    return 'winter', datetime(start_year + 1, 1, 2) + timedelta(days=random.randint(0, 28))


print("Generating synthetic transfer data...")

# ── 1. MARKET TRANSFERS ───────────────────────────────────────────────────────
for n in range(1500):
    buyer = clubs[np.random.choice(len(clubs), p=buy_weights)]
    seller = random.choice(clubs)
    if seller[0] == buyer[0]:
        continue

    season = random.choice(SEASONS)
    window, date = season_window(season)
    transfer_type = random.choice(TRANSFER_TYPES)
    if transfer_type == 'permanent':
        fee = round(float(np.random.lognormal(15.5, 1.1)) * SPEND_WEIGHT[buyer[1]] / 2, -4)
    elif transfer_type == 'loan':
        fee = round(float(np.random.lognormal(13.5, 1.0)), -4)
    else:
        fee = 0

    transfers.append({
        'player_name': f'Player {n:04d}',
        'from_club': seller[0], 'to_club': buyer[0],
        'fee': fee,
        'date': date.strftime('%Y-%m-%d'),
        'from_league': seller[1], 'from_country': seller[2], 'from_continent': seller[3],
        'to_league': buyer[1], 'to_country': buyer[2], 'to_continent': buyer[3],
        'season': season, 'transfer_window': window, 'transfer_type': transfer_type,
        'position': random.choice(POSITIONS),
        'player_age': random.randint(17, 34),
    })

print(f"  Market: {len(transfers)} transfers")

# ── 2. FREE AGENTS AND ACADEMY SIGNINGS (no selling club) ─────────────────────
for n in range(100):
    buyer = random.choice(clubs)
    season = random.choice(SEASONS)
    window, date = season_window(season)
    transfers.append({
        'player_name': f'Free Agent {n:03d}',
        'from_club': None, 'to_club': buyer[0],
        'fee': 0,
        'date': date.strftime('%Y-%m-%d'),
        'from_league': None, 'from_country': None, 'from_continent': None,
        'to_league': buyer[1], 'to_country': buyer[2], 'to_continent': buyer[3],
        'season': season, 'transfer_window': window, 'transfer_type': 'free',
        'position': random.choice(POSITIONS),
        'player_age': random.randint(17, 36),
    })

df = pd.DataFrame(transfers).sort_values('date').reset_index(drop=True)
output_path = OUTPUT_DIR / 'sample_transfers.csv'
df.to_csv(output_path, index=False)

print(f"\nWrote {len(df)} transfers to {output_path}")
print(f"  Clubs:   {df['to_club'].nunique()}")
print(f"  Leagues: {df['to_league'].nunique()}")
print(f"  Total fees: {df['fee'].sum():,.0f}")
