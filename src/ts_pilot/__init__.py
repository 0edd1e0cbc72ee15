"""ts-pilot: TypeScript type tooling served over the Model Context Protocol."""
