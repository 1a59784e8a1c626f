"""
Built-in configuration bundles.

DEFAULT_BUNDLE is applied by quick setup. DISTRIBUTION_CENTER_TEMPLATE is
seeded into the one-click template table at startup. Both use the same
camelCase keys the API accepts.
"""

DEFAULT_BUNDLE = {
    "inventoryGroups": [
        {
            "name": "L0 Inventory Group",
            "storageIdentifiers": {"uom": "L0"},
            "lineIdentifiers": {},
            "description": "Loose (L0) units",
            "stockAllocationStrategies": [
                {"mode": "PICK"},
                {"mode": "PUT", "searchScope": "WH"},
            ],
        },
        {
            "name": "L2 Inventory Group",
            "storageIdentifiers": {"uom": "L2"},
            "lineIdentifiers": {},
            "description": "Case (L2) units",
            "stockAllocationStrategies": [
                {"mode": "PICK", "skipZoneFace": "RESERVE"},
                {"mode": "PUT"},
            ],
        },
        {
            "name": "Replenishment Group",
            "storageIdentifiers": {},
            "lineIdentifiers": {},
            "description": "Replenishment moves",
            "stockAllocationStrategies": [
                {"mode": "PICK"},
                {
                    "mode": "PUT",
                    "skipZoneFace": "RESERVE",
                    "statePreferenceSeq": ["EMPTY", "SKU_EMPTY", "PURE", "IMPURE"],
                },
            ],
        },
    ],
    "taskSequences": [
        {
            "inventoryGroup": "L0 Inventory Group",
            "taskSequences": ["OUTBOUND_REPLEN", "OUTBOUND_PICK", "OUTBOUND_LOAD"],
            "shipmentAcknowledgment": "SHIPMENT",
        },
    ],
    "pickStrategies": [
        {
            "inventoryGroup": "L0 Inventory Group",
            "taskKind": "OUTBOUND_PICK",
            "taskAttrs": {"destUOM": "L0"},
            "strategy": "OPTIMIZE_PICK_PATH",
            "sortingStrategy": "BY_LOCATION",
            "loadingStrategy": "LOAD_BY_LM_TRIP",
            "groupBy": ["uom"],
            "taskLabel": "L0 Pick Strategy",
            "storageIdentifiers": {"uom": "L0"},
            "huFormation": {
                "tripType": "LM",
                "huKinds": ["PALLET"],
                "scanSourceHUKind": "PALLET",
                "pickSourceHUKind": "NONE",
                "carrierHUKind": "PALLET",
                "huMappingMode": "BIN",
                "dropHUQuantThreshold": 0,
                "dropUOM": "L0",
                "allowComplete": False,
                "swapHUThreshold": 0,
                "dropInnerHU": False,
                "allowInnerHUBreak": False,
                "displayDropUOM": False,
                "autoUOMConversion": False,
                "mobileSorting": False,
                "sortingParam": "",
                "huWeightThreshold": 0,
                "qcMismatchMonthThreshold": 0,
                "quantSlottingForHUsInDrop": False,
                "allowPickingMultiBatchfromHU": False,
                "displayEditPickQuantity": False,
                "pickBundles": False,
                "enableEditQtyInPickOp": True,
                "dropSlottingMode": "BIN",
                "enableManualDestBinSelection": False,
            },
            "workOrderManagement": {
                "mapSegregationGroupsToBins": False,
                "dropHUInBin": True,
                "scanDestHUInDrop": False,
                "allowHUBreakInDrop": False,
                "strictBatchAdherence": True,
                "allowWorkOrderSplit": True,
                "undoOp": True,
                "disableWorkOrder": False,
                "allowUnpick": False,
                "supportPalletScan": False,
                "loadingUnits": ["PALLET"],
                "pickMandatoryScan": False,
                "dropMandatoryScan": True,
            },
        },
        {
            "inventoryGroup": "L2 Inventory Group",
            "taskKind": "OUTBOUND_PICK",
            "strategy": "OPTIMIZE_PICK_PATH",
            "sortingStrategy": "BY_LOCATION",
            "loadingStrategy": "LOAD_BY_LM_TRIP",
            "groupBy": ["uom"],
            "taskLabel": "L2 Pick Strategy",
            "storageIdentifiers": {"uom": "L2"},
        },
    ],
}


DISTRIBUTION_CENTER_TEMPLATE = {
    "name": "Distribution Center",
    "description": "High-volume distribution with batch picking and cross-docking capabilities",
    "industry": "Distribution",
    "complexity": "Advanced",
    "is_active": True,
    "template_data": {
        "inventoryGroups": [
            {
                "name": "L0 Items",
                "storageIdentifiers": {"uom": "L0"},
                "lineIdentifiers": {},
                "description": "Level 0 items with area-based picking",
            },
            {
                "name": "L2 Items",
                "storageIdentifiers": {"uom": "L2"},
                "lineIdentifiers": {},
                "description": "Level 2 items with UOM-based picking",
            },
        ],
        "taskSequences": [
            {
                "taskSequences": ["OUTBOUND_REPLEN", "OUTBOUND_PICK", "OUTBOUND_LOAD"],
                "shipmentAcknowledgment": "SHIP_CONFIRM",
            },
        ],
        "taskPlanning": {
            "configurationName": "PICK_BY_CUSTOMER",
            "groupBy": ["area", "uom"],
        },
        "taskExecution": {
            "configurationName": "Distribution Center Execution",
            "tripType": "LM",
            "scanSourceHUKind": "PALLET",
            "pickSourceHUKind": "NONE",
            "carrierHUKind": "PALLET",
            "pickMandatoryScan": False,
            "dropMandatoryScan": False,
            "dropHUInBin": True,
            "allowHUBreakInDrop": False,
            "dropInnerHU": False,
            "allowInnerHUBreak": False,
            "allowComplete": False,
            "autoUOMConversion": False,
            "displayEditPickQuantity": False,
            "allowWorkOrderSplit": True,
        },
    },
}
