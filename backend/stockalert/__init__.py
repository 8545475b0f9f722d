"""Stock alert backend: quote polling with Web Push threshold alerts."""
