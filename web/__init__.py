"""Flask front end for the next word predictor."""
