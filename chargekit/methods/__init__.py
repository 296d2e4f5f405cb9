"""Charge methods: reference, equalization, iterative and split-charge."""