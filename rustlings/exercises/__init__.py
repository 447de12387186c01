"""Worked solutions of the exercise topics, one module per topic."""