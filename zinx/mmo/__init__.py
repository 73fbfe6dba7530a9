"""Area-of-interest grid and world bookkeeping for multiplayer game servers."""