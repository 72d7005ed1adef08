# seotag — Core services
# Pure helpers shared by the resolver components; no I/O
