"""Board state machine, entry form and the controller that hands off between them."""
