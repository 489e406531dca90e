"""SimpleCalc: a single-screen desktop calculator."""
