"""Entities, player physics and game state of a small platform jumper."""