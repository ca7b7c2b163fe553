"""
Example demonstrating the climate simulation and biome classification.
"""

import numpy as np
import matplotlib.pyplot as plt
from opensimplex import OpenSimplex

from py_climate.core import (
    BiomeClassifier, ClimateOptions, BiomeScheme, TerrainBiome,
    generate_world_climate, scale_heightmap,
)
from py_climate.core.biomes import BIOME_NAMES
from py_climate.utils import configure_logging


def noise_heightmap(dim_x, dim_y, seed):
    """Normalized [0, 1] fractal noise heightmap."""
    noise = OpenSimplex(seed=seed)
    heights = np.zeros((dim_x, dim_y))
    for x in range(dim_x):
        for y in range(dim_y):
            nx, ny = x / dim_x, y / dim_y
            heights[x, y] = (
                noise.noise2(nx * 3, ny * 3)
                + 0.5 * noise.noise2(nx * 6, ny * 6)
                + 0.25 * noise.noise2(nx * 12, ny * 12)
            )
    heights -= heights.min()
    return heights / heights.max()


def main():
    configure_logging(fmt="console")

    # Configuration
    seed = 1234
    dim_x, dim_y = 100, 100

    normalized = noise_heightmap(dim_x, dim_y, seed)
    heightmap = scale_heightmap(normalized)

    print("Simulating climate...")
    world = generate_world_climate(
        heightmap,
        seed=seed,
        years=1,
        scheme=BiomeScheme.ELEVATION,
        options=ClimateOptions(),
    )

    averages = world.averages
    print(f"Average temperature: {averages.temperature.mean():.3f}")
    print(f"Average humidity: {averages.humidity.mean():.3f}")
    print(f"Average rain: {averages.rain.mean():.4f}")
    print(f"Average cloud cover: {averages.cloud.mean():.4f}")

    # Visualize results
    fig, axes = plt.subplots(2, 3, figsize=(15, 10))

    panels = [
        (heightmap, 'Elevation', 'terrain', 'm'),
        (averages.temperature.values, 'Average Temperature', 'RdBu_r', ''),
        (averages.humidity.values, 'Average Humidity', 'YlGnBu', ''),
        (averages.rain.values, 'Average Rain', 'Blues', 'fraction of days'),
        (averages.wind.values, 'Average Wind Speed', 'viridis', ''),
    ]
    for ax, (values, title, cmap, label) in zip(axes.flat, panels):
        image = ax.imshow(values.T, cmap=cmap, origin='lower')
        ax.set_title(title)
        plt.colorbar(image, ax=ax, label=label)

    ax = axes[1, 2]
    image = ax.imshow(
        world.biomes.values.T, cmap='tab20', origin='lower',
        vmin=0, vmax=len(TerrainBiome) - 1,
    )
    ax.set_title('Biomes')
    cbar = plt.colorbar(image, ax=ax, ticks=range(len(TerrainBiome)))
    cbar.ax.set_yticklabels([BIOME_NAMES[b] for b in TerrainBiome])

    plt.tight_layout()
    plt.savefig('climate_demo.png', dpi=150)
    print("\nClimate visualization saved to climate_demo.png")

    # Replay a month of weather as debug frames
    frames = [
        snapshot.precipitation_overlay(normalized)
        for snapshot in world.display.frames(days=30)
    ]
    plt.figure(figsize=(6, 6))
    plt.imshow(frames[-1].T, cmap='gray', origin='lower')
    plt.title(f'Clouds and rain, day {len(frames) - 1}')
    plt.savefig('climate_demo_weather.png', dpi=150)
    print("Weather frame saved to climate_demo_weather.png")

    # Print some statistics
    print("\nBiome distribution:")
    classifier = BiomeClassifier(dim_x, dim_y, scheme=world.scheme)
    total = world.biomes.size
    for name, count in sorted(classifier.get_biome_statistics(world.biomes).items()):
        print(f"  {name}: {count} cells ({count / total * 100:.1f}%)")


if __name__ == "__main__":
    main()
