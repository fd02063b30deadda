"""Analysis module - offer odds for balance tuning."""

from .offer_odds import first_draw_probabilities, simulate_offer_rates, rarity_offer_share
