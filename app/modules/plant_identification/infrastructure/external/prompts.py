# 📄 File: app/modules/plant_identification/infrastructure/external/prompts.py
# 🧭 Purpose (Layman Explanation):
# The exact instructions we give the AI botanist, and the answer form it must fill in.
# 🧪 Purpose (Technical Summary):
# Prompt templates and Gemini responseSchema declarations for plant analysis
# (image) and care guidance (plant name).
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# gemini_client.py

PLANT_ANALYSIS_PROMPT = """You are an expert botanist and plant pathologist. Analyze the plant in the attached image.

Based on the image and your knowledge:
1.  **Identify the plant:** Provide its most common name. If you cannot identify it, respond with "Unknown" for the commonName and skip the other points.
2.  **Scientific & Alternative Names:** Provide the scientific (Latin) name and a list of any other common names it's known by (alternativeNames). If none, provide an empty list for alternativeNames.
3.  **Classify:** Is this type of plant generally considered a weed?
4.  **Assess Health:** Evaluate the plant's health based *only* on what you see in the image. Describe its condition (e.g., Healthy, Needs Water, Yellowing Leaves, Possible Pest Damage, Fungal Spots).
5.  **Propose Actions:** Suggest specific, actionable steps the user can take *based on your visual health assessment* to improve the plant's condition. If the plant looks healthy, suggest routine care actions.
6.  **Provide General Care:** Give brief, general care instructions suitable for this type of plant (assuming it's healthy).
7.  **Botanical Details (Optional):** If readily available, provide the typical mature height, spread, growth rate, basic flowering information (including typical season/months, e.g., "Blooms in spring (March-May) with white flowers"), and basic pruning advice. If not readily available, omit these fields.
8.  **Edible Fruit:** Determine if this plant produces edible fruit.
    *   If YES (isEdibleFruit: true): state when the fruit typically starts growing (fruitGrowthSeason), give care tips for healthy fruit production (fruitCareInstructions), and say when the fruit is usually ready for harvest (fruitHarvestTime).
    *   If NO (isEdibleFruit: false), omit fruitGrowthSeason, fruitCareInstructions and fruitHarvestTime.

Respond *only* with a JSON object matching the output schema."""


CARE_GUIDANCE_PROMPT_TEMPLATE = """You are an expert botanist. Determine if the plant named "{plant_name}" is a weed. Also provide the care instructions for the plant.

Respond *only* with a JSON object matching the output schema."""


def _text(description: str) -> dict:
    return {"type": "STRING", "description": description}


IDENTIFICATION_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "commonName": _text('The most common name of the identified plant. Respond with "Unknown" if not identifiable.'),
        "latinName": _text("The scientific (Latin) name of the plant."),
        "alternativeNames": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "Other common names the plant might be known by.",
        },
        "isWeed": {"type": "BOOLEAN", "description": "Whether the plant is generally classified as a weed."},
        "careInstructions": _text("General instructions on how to care for this type of plant."),
        "healthStatus": _text(
            "An assessment of the plant's health based on the image "
            "(e.g., Healthy, Needs Water, Diseased, Pest Infestation)."
        ),
        "proposedActions": _text(
            "Specific actions to take based on the visual health assessment to improve the plant's condition."
        ),
        "height": _text('Typical mature height of the plant (e.g., "1-2 ft", "Up to 10m").'),
        "spread": _text('Typical mature spread or width of the plant (e.g., "2-3 ft", "5m wide").'),
        "growthRate": _text('The typical growth rate (e.g., "Slow", "Moderate", "Fast").'),
        "floweringInfo": _text("Information about its flowers, including typical blooming season or months."),
        "pruningInfo": _text("Basic instructions or tips on how and when to prune the plant."),
        "isEdibleFruit": {"type": "BOOLEAN", "description": "Whether the plant produces edible fruit."},
        "fruitGrowthSeason": _text(
            "The season(s) or months when the fruit typically starts to grow. Provide only if isEdibleFruit is true."
        ),
        "fruitCareInstructions": _text(
            "Care instructions focused on healthy fruit production. Provide only if isEdibleFruit is true."
        ),
        "fruitHarvestTime": _text(
            "When the fruit is typically ready for harvest. Provide only if isEdibleFruit is true."
        ),
    },
    "required": ["commonName", "isWeed", "careInstructions", "healthStatus", "proposedActions"],
}


CARE_GUIDANCE_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "isWeed": {"type": "BOOLEAN", "description": "Whether the plant is considered a weed."},
        "careInstructions": _text("Instructions on how to care for the plant."),
    },
    "required": ["isWeed", "careInstructions"],
}
